"""
Tests for levels adjustment
"""

import numpy as np
import pytest

from core.exceptions import OutOfRangeError
from core.pixel_buffer import PixelBuffer
from core.region import SplitRegion, apply_region
from imaging.levels import fit_tone_curve, levels_adjust


class TestToneCurve:
    """Test fitting and evaluating the quadratic"""

    def test_identity_curve(self):
        """Test (0, 128, 255) fits the identity line"""
        curve = fit_tone_curve(0, 128, 255)

        assert curve.a == pytest.approx(0.0)
        assert curve.b == pytest.approx(1.0)
        assert curve.c == pytest.approx(0.0)
        values = np.arange(256)
        assert np.array_equal(curve.evaluate(values), values)

    def test_passes_through_control_points(self):
        curve = fit_tone_curve(20, 100, 230)
        result = curve.evaluate(np.array([21, 100, 229]))

        assert result[1] == 128
        assert 0 <= result[0] < 10
        assert 245 < result[2] <= 255

    def test_clips_outside_black_and_white(self):
        """Test values at or below black are 0 and at or above white are 255"""
        curve = fit_tone_curve(50, 100, 200)
        result = curve.evaluate(np.array([0, 50, 200, 255]))
        assert result.tolist() == [0, 0, 255, 255]

    def test_monotone_range(self):
        curve = fit_tone_curve(10, 90, 240)
        result = curve.evaluate(np.arange(256))
        assert result.min() >= 0
        assert result.max() <= 255

    @pytest.mark.parametrize(
        "black,mid,white",
        [(100, 100, 200), (0, 200, 100), (50, 20, 255), (-1, 128, 255), (0, 128, 256)],
    )
    def test_rejects_bad_ordering(self, black, mid, white):
        """Test anything but 0 <= b < m < w <= 255 raises OutOfRangeError"""
        with pytest.raises(OutOfRangeError):
            fit_tone_curve(black, mid, white)


class TestLevelsAdjust:
    """Test levels on images"""

    def test_identity_leaves_image(self, scenario_image):
        curve = fit_tone_curve(0, 128, 255)
        assert PixelBuffer(levels_adjust(scenario_image, curve)) == scenario_image

    def test_split_half_keeps_right_column(self, scenario_image):
        """Test levels at p=50 leaves (2, 2) at (192, 192, 192)"""
        curve = fit_tone_curve(0, 128, 255)
        result = apply_region(
            scenario_image, lambda image: levels_adjust(image, curve), SplitRegion(50)
        )
        assert result.get_pixel(2, 2) == (192, 192, 192)

    def test_brightening_curve(self, scenario_image):
        """Test a low mid point lifts the grey pixel"""
        curve = fit_tone_curve(0, 64, 255)
        result = PixelBuffer(levels_adjust(scenario_image, curve))
        assert result.get_pixel(1, 2) == (128, 128, 128)
        assert result.get_pixel(0, 2)[0] > 128
