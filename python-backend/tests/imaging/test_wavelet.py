"""
Tests for Haar wavelet compression
"""

import numpy as np
import pytest

from core.exceptions import OutOfRangeError
from core.pixel_buffer import PixelBuffer
from imaging.wavelet import (
    compress,
    haar_forward,
    haar_inverse,
    next_power_of_two,
    pad_to_square,
    threshold_coefficients,
)


class TestHelpers:
    """Test padding helpers"""

    @pytest.mark.parametrize("n,expected", [(1, 1), (2, 2), (3, 4), (5, 8), (8, 8), (9, 16)])
    def test_next_power_of_two(self, n, expected):
        assert next_power_of_two(n) == expected

    def test_pad_to_square(self, gradient_image):
        """Test padding places the image top-left on black"""
        grid = pad_to_square(gradient_image)

        assert grid.shape == (8, 8, 3)
        assert np.array_equal(grid[:5, :8], gradient_image.pixels)
        assert not grid[5:].any()


class TestHaarTransform:
    """Test the forward and inverse passes"""

    def test_forward_uniform_block(self):
        """Test a flat 2x2 block puts all energy in the first coefficient"""
        coefficients = haar_forward(np.full((2, 2), 100))
        assert coefficients.tolist() == [[199, 0], [0, 0]]

    def test_inverse_truncates(self):
        """Test the inverse truncates at every step"""
        restored = haar_inverse(np.array([[199, 0], [0, 0]]))
        assert restored.tolist() == [[98, 98], [98, 98]]

    def test_forward_pairs_on_rows(self):
        coefficients = haar_forward(np.array([[10, 0], [0, 0]]))
        # row pass: [7, 7]; column pass: [[4, 4], [4, 4]]
        assert coefficients.tolist() == [[4, 4], [4, 4]]


class TestThreshold:
    """Test coefficient discarding"""

    def test_zero_percent_drops_smallest(self):
        """Test k = n still zeroes magnitudes equal to the smallest one"""
        coefficients = np.array([5, -3, 0, 8, 1])
        assert threshold_coefficients(coefficients, 0).tolist() == [5, -3, 0, 8, 0]

    def test_half(self):
        """Test k = trunc(n * 0.5) largest magnitudes survive"""
        coefficients = np.array([5, -3, 0, 8, 1])
        # n = 4, k = 2, threshold = 5: |v| <= 5 is zeroed
        assert threshold_coefficients(coefficients, 50).tolist() == [0, 0, 0, 8, 0]

    def test_hundred_percent_clears(self):
        coefficients = np.array([5, -3, 8])
        assert not threshold_coefficients(coefficients, 100).any()

    def test_all_zero_unchanged(self):
        coefficients = np.zeros(6, dtype=np.int64)
        assert not threshold_coefficients(coefficients, 40).any()

    def test_input_not_modified(self):
        coefficients = np.array([5, -3, 8])
        threshold_coefficients(coefficients, 100)
        assert coefficients.tolist() == [5, -3, 8]


class TestCompress:
    """Test full compression round trips"""

    def test_flat_image_clears_at_zero_percent(self):
        """Test a flat image, whose only coefficients tie for smallest, goes black"""
        image = PixelBuffer(np.full((2, 2, 3), 100))
        assert not compress(image, 0).pixels.any()

    def test_zero_percent_is_lossy(self, gradient_image):
        assert compress(gradient_image, 0) != gradient_image

    def test_hundred_percent_is_black(self, gradient_image):
        result = compress(gradient_image, 100)
        assert result.size == gradient_image.size
        assert not result.pixels.any()

    def test_black_image_stays_black(self):
        result = compress(PixelBuffer.blank(3, 5), 60)
        assert result == PixelBuffer.blank(3, 5)

    def test_keeps_original_size(self, gradient_image):
        result = compress(gradient_image, 30)
        assert result.size == (8, 5)

    def test_discarding_everything_loses_most(self, gradient_image):
        original = gradient_image.to_array()
        errors = [np.abs(compress(gradient_image, p).to_array() - original).sum() for p in (0, 100)]
        assert errors[0] < errors[1]

    @pytest.mark.parametrize("percentage", [-1, 101])
    def test_rejects_out_of_range(self, scenario_image, percentage):
        with pytest.raises(OutOfRangeError):
            compress(scenario_image, percentage)
