"""
Tests for bilinear resampling
"""

import numpy as np
import pytest

from core.exceptions import InvalidDimensionsError
from core.pixel_buffer import PixelBuffer
from imaging.resample import resample


class TestResample:
    """Test bilinear resampling"""

    def test_identity(self, gradient_image):
        """Test resampling to the original size reproduces the image"""
        assert resample(gradient_image, 8, 5) == gradient_image

    def test_halving_picks_even_pixels(self):
        """Test a 2:1 reduction samples integer source positions exactly"""
        pixels = np.arange(4 * 4 * 3).reshape(4, 4, 3) * 5
        image = PixelBuffer(pixels)
        result = resample(image, 2, 2)

        assert result.size == (2, 2)
        assert result.get_pixel(0, 0) == image.get_pixel(0, 0)
        assert result.get_pixel(1, 0) == image.get_pixel(2, 0)
        assert result.get_pixel(0, 1) == image.get_pixel(0, 2)
        assert result.get_pixel(1, 1) == image.get_pixel(2, 2)

    def test_blends_between_columns(self):
        """Test a half-pixel offset averages neighbours, rounding half up"""
        image = PixelBuffer.from_rows([[[0, 0, 0], [101, 100, 99]]])
        result = resample(image, 4, 1)

        # xs = 0, 0.5, 1, 1.5; the right neighbour clamps to the last column
        assert result.get_pixel(1, 0) == (51, 50, 50)
        assert result.get_pixel(2, 0) == (101, 100, 99)
        assert result.get_pixel(3, 0) == (101, 100, 99)

    def test_single_pixel(self, scenario_image):
        result = resample(scenario_image, 1, 1)
        assert result.get_pixel(0, 0) == (255, 0, 0)

    def test_non_square_target(self, gradient_image):
        result = resample(gradient_image, 3, 2)
        assert result.size == (3, 2)
        assert result.pixels.max() <= 255

    @pytest.mark.parametrize("width,height", [(0, 2), (2, 0), (-3, 3)])
    def test_rejects_non_positive(self, scenario_image, width, height):
        with pytest.raises(InvalidDimensionsError):
            resample(scenario_image, width, height)
