"""
Bilinear resampling.
"""

import numpy as np

from core.exceptions import InvalidDimensionsError
from core.pixel_buffer import PixelBuffer


def resample(image: PixelBuffer, new_width: int, new_height: int) -> PixelBuffer:
    """
    Resample to (new_width, new_height) with bilinear interpolation.

    Destination (xd, yd) maps to source (xd * W / new_width, yd * H / new_height);
    the four surrounding pixels are blended by the fractional offsets, with the
    right/bottom neighbours clamped to the last column/row. Results are rounded
    half up. A 1:1 mapping reproduces the input exactly.

    Raises:
        InvalidDimensionsError: If either target dimension is not positive
    """
    if new_width <= 0 or new_height <= 0:
        raise InvalidDimensionsError(
            f"Target dimensions must be positive, got {new_width}x{new_height}",
            new_width,
            new_height,
        )

    width, height = image.width, image.height
    xs = np.arange(new_width) * (width / new_width)
    ys = np.arange(new_height) * (height / new_height)

    x1 = np.floor(xs).astype(np.int64)
    y1 = np.floor(ys).astype(np.int64)
    x2 = np.minimum(x1 + 1, width - 1)
    y2 = np.minimum(y1 + 1, height - 1)

    x_frac = (xs - x1)[np.newaxis, :, np.newaxis]
    y_frac = (ys - y1)[:, np.newaxis, np.newaxis]

    source = image.to_array(np.float64)
    p11 = source[y1[:, None], x1[None, :]]
    p21 = source[y1[:, None], x2[None, :]]
    p12 = source[y2[:, None], x1[None, :]]
    p22 = source[y2[:, None], x2[None, :]]

    top = p11 * (1 - x_frac) + p21 * x_frac
    bottom = p12 * (1 - x_frac) + p22 * x_frac
    blended = top * (1 - y_frac) + bottom * y_frac

    return PixelBuffer(np.floor(blended + 0.5))
