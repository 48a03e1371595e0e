"""
PixelBuffer - the canonical in-memory RGB image.

A buffer wraps a read-only numpy uint8 array of shape (height, width, 3) in
row-major order. Every constructor clamps to [0, 255]; single-pixel access is
bounds checked. Buffers are never mutated once created: writers return a new
instance.
"""

from typing import Sequence, Tuple

import numpy as np

from core.constants import ImageConstants
from core.exceptions import InvalidDimensionsError, PixelOutOfRangeError

Pixel = Tuple[int, int, int]


def clamp_array(values: np.ndarray) -> np.ndarray:
    """Clamp any numeric array to [0, 255] and return it as uint8."""
    return np.clip(values, ImageConstants.MIN_VALUE, ImageConstants.MAX_VALUE).astype(np.uint8)


class PixelBuffer:
    """Immutable RGB raster with clamped 8-bit channels"""

    __slots__ = ("_pixels",)

    def __init__(self, pixels: np.ndarray):
        """
        Create a buffer from an array of shape (height, width, 3).

        Args:
            pixels: Array-like of channel values; copied and clamped to [0, 255]

        Raises:
            InvalidDimensionsError: If the shape is not (h, w, 3) with h, w > 0
        """
        array = np.asarray(pixels)
        if array.ndim != 3 or array.shape[2] != ImageConstants.CHANNELS:
            raise InvalidDimensionsError(
                f"Pixel array must have shape (height, width, 3), got {array.shape}"
            )
        height, width = array.shape[:2]
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"Image dimensions must be positive, got {width}x{height}", width, height
            )

        data = clamp_array(array)
        data.flags.writeable = False
        self._pixels = data

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        """Create an all-black buffer."""
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"Image dimensions must be positive, got {width}x{height}", width, height
            )
        return cls(np.zeros((height, width, ImageConstants.CHANNELS), dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> "PixelBuffer":
        """Create a buffer from nested rows of [r, g, b] triples."""
        return cls(np.array(rows, dtype=np.int64))

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """Read-only uint8 view of shape (height, width, 3)."""
        return self._pixels

    def to_array(self, dtype=np.int64) -> np.ndarray:
        """Writable copy of the pixel data, widened for arithmetic by default."""
        return self._pixels.astype(dtype)

    def _check_bounds(self, x: int, y: int) -> None:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise PixelOutOfRangeError(x, y, self.width, self.height)

    def get_pixel(self, x: int, y: int) -> Pixel:
        """
        Get the RGB values at (x, y).

        Raises:
            PixelOutOfRangeError: If the coordinates are out of bounds
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def with_pixel(self, x: int, y: int, rgb: Sequence[int]) -> "PixelBuffer":
        """
        Return a copy with the pixel at (x, y) replaced (values clamped).

        Raises:
            PixelOutOfRangeError: If the coordinates are out of bounds
            ValueError: If rgb does not hold exactly three values
        """
        self._check_bounds(x, y)
        if len(rgb) != ImageConstants.CHANNELS:
            raise ValueError("RGB value must have three elements")
        data = self.to_array()
        data[y, x] = rgb
        return PixelBuffer(data)

    def same_size(self, other: "PixelBuffer") -> bool:
        return self.size == other.size

    @property
    def nbytes(self) -> int:
        return int(self._pixels.nbytes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
