"""
Fixed-kernel spatial filters (blur, sharpen).

Convolution at (x, y) sums kernel[i][j] * pixel(x + i - half, y + j - half)
over in-bounds taps only, divides by the kernel's fixed divisor and clamps.
Taps falling outside the image contribute nothing while the divisor stays the
same, so edge pixels come out darker than interior ones.
"""

from typing import Sequence

import numpy as np

from core.constants import FilterConstants
from core.pixel_buffer import PixelBuffer


def convolve(image: PixelBuffer, kernel: Sequence[Sequence[int]], divisor: int) -> np.ndarray:
    """
    Convolve every channel with a square kernel.

    Args:
        image: Source buffer
        kernel: Square kernel, first index along x, second along y
        divisor: Fixed normalization divisor

    Returns:
        Clamped int array of shape (height, width, 3)
    """
    weights = np.asarray(kernel, dtype=np.int64)
    size = weights.shape[0]
    if weights.shape != (size, size) or size % 2 == 0:
        raise ValueError(f"Kernel must be square with odd size, got {weights.shape}")

    half = size // 2
    height, width = image.height, image.width

    # Zero border: a skipped tap and a zero tap add the same amount to the sum
    padded = np.pad(image.to_array(), ((half, half), (half, half), (0, 0)), mode="constant")

    total = np.zeros((height, width, 3), dtype=np.int64)
    for i in range(size):
        for j in range(size):
            weight = weights[i, j]
            if weight == 0:
                continue
            total += weight * padded[j : j + height, i : i + width]

    # negative sums clamp to 0, so floor division matches truncation
    return np.clip(total // divisor, 0, 255)


def blur(image: PixelBuffer) -> np.ndarray:
    """3x3 Gaussian-like blur"""
    return convolve(image, FilterConstants.BLUR_KERNEL, FilterConstants.BLUR_DIVISOR)


def sharpen(image: PixelBuffer) -> np.ndarray:
    """5x5 sharpening ring kernel"""
    return convolve(image, FilterConstants.SHARPEN_KERNEL, FilterConstants.SHARPEN_DIVISOR)
