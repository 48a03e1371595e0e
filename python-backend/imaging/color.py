"""
Per-pixel color transforms.

Each transform maps a PixelBuffer to a (height, width, 3) int array computed
pixel by pixel from the source alone. Weighted sums use integer-scaled
weights so that truncation is exact floor arithmetic.
"""

from typing import Callable, Dict

import numpy as np

from core.constants import ColorConstants
from core.enums import Component
from core.pixel_buffer import PixelBuffer

ColorTransform = Callable[[PixelBuffer], np.ndarray]


def _replicate(channel: np.ndarray) -> np.ndarray:
    """Broadcast a (h, w) plane into all three channels"""
    return np.repeat(channel[..., np.newaxis], 3, axis=2)


def red(image: PixelBuffer) -> np.ndarray:
    return _replicate(image.to_array()[..., 0])


def green(image: PixelBuffer) -> np.ndarray:
    return _replicate(image.to_array()[..., 1])


def blue(image: PixelBuffer) -> np.ndarray:
    return _replicate(image.to_array()[..., 2])


def value(image: PixelBuffer) -> np.ndarray:
    """max(r, g, b)"""
    return _replicate(image.to_array().max(axis=2))


def luma(image: PixelBuffer) -> np.ndarray:
    """floor(0.2126 r + 0.7152 g + 0.0722 b)"""
    weights = np.array(ColorConstants.LUMA_WEIGHTS, dtype=np.int64)
    weighted = image.to_array() @ weights
    return _replicate(weighted // ColorConstants.LUMA_SCALE)


def intensity(image: PixelBuffer) -> np.ndarray:
    """floor((r + g + b) / 3)"""
    return _replicate(image.to_array().sum(axis=2) // 3)


def sepia(image: PixelBuffer) -> np.ndarray:
    """
    Apply the sepia tone matrix.

    Output channel i is trunc(sum_j M[i][j] * rgb[j]) clamped to [0, 255].
    """
    matrix = np.array(ColorConstants.SEPIA_MATRIX, dtype=np.int64)
    toned = (image.to_array() @ matrix.T) // ColorConstants.SEPIA_SCALE
    return np.clip(toned, 0, 255)


def brightness(amount: int) -> ColorTransform:
    """
    Build a transform that adds ``amount`` to every channel.

    Each channel is clamped independently, so (255, 0, 0) brightened by 50
    becomes (255, 50, 50).
    """

    def shift(image: PixelBuffer) -> np.ndarray:
        return np.clip(image.to_array() + int(amount), 0, 255)

    return shift


COMPONENT_TRANSFORMS: Dict[Component, ColorTransform] = {
    Component.RED: red,
    Component.GREEN: green,
    Component.BLUE: blue,
    Component.VALUE: value,
    Component.LUMA: luma,
    Component.INTENSITY: intensity,
}


def component(kind: Component) -> ColorTransform:
    """Look up the transform for a component kind"""
    return COMPONENT_TRANSFORMS[Component(kind)]
