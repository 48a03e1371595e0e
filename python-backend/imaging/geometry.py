"""
Mirroring and RGB channel split/combine.
"""

from typing import Tuple

import numpy as np

from core.enums import FlipAxis
from core.exceptions import DimensionMismatchError
from core.pixel_buffer import PixelBuffer
from imaging.color import blue, green, red


def flip(image: PixelBuffer, axis: FlipAxis) -> PixelBuffer:
    """
    Mirror an image.

    Horizontal: source (x, y) lands on (width - 1 - x, y).
    Vertical: source (x, y) lands on (x, height - 1 - y).
    """
    pixels = image.pixels
    if FlipAxis(axis) is FlipAxis.HORIZONTAL:
        return PixelBuffer(pixels[:, ::-1])
    return PixelBuffer(pixels[::-1, :])


def split_rgb(image: PixelBuffer) -> Tuple[PixelBuffer, PixelBuffer, PixelBuffer]:
    """Red, green and blue component images"""
    return PixelBuffer(red(image)), PixelBuffer(green(image)), PixelBuffer(blue(image))


def combine_rgb(red_image: PixelBuffer, green_image: PixelBuffer, blue_image: PixelBuffer) -> PixelBuffer:
    """
    Build an image from the red channel of the first input, the green channel
    of the second and the blue channel of the third.

    Raises:
        DimensionMismatchError: If the three inputs differ in size
    """
    for other, label in ((green_image, "Green image"), (blue_image, "Blue image")):
        if not red_image.same_size(other):
            raise DimensionMismatchError(red_image.size, other.size, what=label)

    combined = np.stack(
        [red_image.pixels[..., 0], green_image.pixels[..., 1], blue_image.pixels[..., 2]],
        axis=-1,
    )
    return PixelBuffer(combined)
