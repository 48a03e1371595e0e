"""
Region policy - which pixels an edit operation affects.

Three policies share one composition rule:
- FullRegion: every pixel
- SplitRegion: columns left of floor(width * percentage / 100)
- MaskRegion: pixels where a same-sized mask image is exactly (0, 0, 0)

Every region-restrictable operation passes its whole-image transform to
``apply_region``, which keeps the original value wherever the policy says the
pixel is unaffected.
"""

from typing import Callable

import numpy as np

from core.exceptions import DimensionMismatchError, check_percentage
from core.pixel_buffer import PixelBuffer


class Region:
    """Base policy: subclasses return a boolean (height, width) selection"""

    def affected(self, width: int, height: int) -> np.ndarray:
        raise NotImplementedError

    def describe(self) -> str:
        return self.__class__.__name__


class FullRegion(Region):
    """Every pixel is affected"""

    def affected(self, width: int, height: int) -> np.ndarray:
        return np.ones((height, width), dtype=bool)

    def describe(self) -> str:
        return "full"


class SplitRegion(Region):
    """Split-view: the left ``percentage`` of columns is affected"""

    def __init__(self, percentage: int):
        """
        Raises:
            OutOfRangeError: If percentage is outside [0, 100]
        """
        self.percentage = check_percentage(percentage)

    def boundary(self, width: int) -> int:
        """First unaffected column index"""
        return width * self.percentage // 100

    def affected(self, width: int, height: int) -> np.ndarray:
        columns = np.arange(width) < self.boundary(width)
        return np.broadcast_to(columns, (height, width))

    def describe(self) -> str:
        return f"split {self.percentage}%"


class MaskRegion(Region):
    """Pixels that are pure black in the mask image are affected"""

    def __init__(self, mask: PixelBuffer):
        self.mask = mask

    def affected(self, width: int, height: int) -> np.ndarray:
        if self.mask.size != (width, height):
            raise DimensionMismatchError((width, height), self.mask.size, what="Mask image")
        return np.all(self.mask.pixels == 0, axis=2)

    def describe(self) -> str:
        return f"mask {self.mask.width}x{self.mask.height}"


FULL = FullRegion()


def apply_region(
    source: PixelBuffer,
    transform: Callable[[PixelBuffer], np.ndarray],
    region: Region = FULL,
) -> PixelBuffer:
    """
    Run a whole-image transform and keep its output only on affected pixels.

    The selection is computed first so a mismatched mask fails before any work
    is done, and an empty selection skips the transform entirely.
    """
    selection = region.affected(source.width, source.height)
    if not selection.any():
        return PixelBuffer(source.pixels)

    transformed = transform(source)
    if selection.all():
        return PixelBuffer(transformed)

    merged = np.where(selection[..., np.newaxis], transformed, source.pixels)
    return PixelBuffer(merged)
