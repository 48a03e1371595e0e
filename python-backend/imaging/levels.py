"""
Levels adjustment with a quadratic tone curve.

The curve y = a*x^2 + b*x + c passes through (black, 0), (mid, 128) and
(white, 255). Values at or below the black point map to 0, values at or above
the white point map to 255.
"""

from dataclasses import dataclass

import numpy as np

from core.constants import ImageConstants, LevelsConstants
from core.exceptions import OutOfRangeError
from core.pixel_buffer import PixelBuffer


@dataclass(frozen=True)
class ToneCurve:
    """Quadratic coefficients fitted through the three control points"""

    black: int
    mid: int
    white: int
    a: float
    b: float
    c: float

    def evaluate(self, x: np.ndarray) -> np.ndarray:
        """Map channel values through the curve (rounded half up, clamped)."""
        x = np.asarray(x, dtype=np.int64)
        curve = self.a * x * x + self.b * x + self.c
        mapped = np.clip(np.floor(curve + 0.5), 0, 255).astype(np.int64)
        mapped = np.where(x <= self.black, LevelsConstants.BLACK_OUTPUT, mapped)
        return np.where(x >= self.white, LevelsConstants.WHITE_OUTPUT, mapped)


def validate_levels(black: int, mid: int, white: int) -> None:
    """
    Raises:
        OutOfRangeError: Unless 0 <= black < mid < white <= 255
    """
    if not (ImageConstants.MIN_VALUE <= black < mid < white <= ImageConstants.MAX_VALUE):
        raise OutOfRangeError(
            f"Levels must satisfy 0 <= b < m < w <= 255, got b={black}, m={mid}, w={white}"
        )


def fit_tone_curve(black: int, mid: int, white: int) -> ToneCurve:
    """
    Solve for the curve through (black, 0), (mid, 128), (white, 255).

    Closed form with the shared determinant
    D = b^2 (m - w) - b (m^2 - w^2) + w m^2 - m w^2.
    """
    validate_levels(black, mid, white)
    b, m, w = int(black), int(mid), int(white)
    md, hi = LevelsConstants.MID_OUTPUT, LevelsConstants.WHITE_OUTPUT

    # Cramer terms with the black output fixed at 0
    determinant = b * b * (m - w) - b * (m * m - w * w) + w * m * m - m * w * w
    a_num = -b * (md - hi) + md * w - hi * m
    b_num = b * b * (md - hi) + hi * m * m - md * w * w
    c_num = b * b * (hi * m - md * w) - b * (hi * m * m - md * w * w)

    return ToneCurve(
        black=b,
        mid=m,
        white=w,
        a=a_num / determinant,
        b=b_num / determinant,
        c=c_num / determinant,
    )


def levels_adjust(image: PixelBuffer, curve: ToneCurve) -> np.ndarray:
    """Apply a fitted tone curve to all three channels."""
    return curve.evaluate(image.to_array())
