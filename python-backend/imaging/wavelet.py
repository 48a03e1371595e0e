"""
Lossy image compression with a multi-level 2D Haar wavelet transform.

Pipeline:
1. Pad to a power-of-two square with black pixels (right/bottom)
2. Forward transform each channel: rows then columns of the leading s x s
   block, for s = side, side/2, ..., 2
3. Zero out the smallest coefficients, pooled across all channels
4. Inverse transform: columns then rows, for s = 2, 4, ..., side
5. Crop back to the original size

Every 1D step truncates to integers, so the round trip is lossy even when no
coefficient is discarded.
"""

import logging

import numpy as np

from core.constants import WaveletConstants
from core.exceptions import check_percentage
from core.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

SQRT2 = WaveletConstants.SQRT2


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (n must be positive)"""
    if n <= 0:
        raise ValueError("Number must be positive")
    power = 1
    while power < n:
        power *= 2
    return power


def pad_to_square(image: PixelBuffer) -> np.ndarray:
    """
    Copy the image into the top-left of a black power-of-two square.

    Returns:
        int64 array of shape (side, side, 3)
    """
    side = next_power_of_two(max(image.width, image.height))
    grid = np.zeros((side, side, 3), dtype=np.int64)
    grid[: image.height, : image.width] = image.pixels
    return grid


def _forward_pairs(values: np.ndarray, axis: int) -> np.ndarray:
    """Averages then differences of adjacent pairs along ``axis``."""
    even = np.take(values, np.arange(0, values.shape[axis], 2), axis=axis)
    odd = np.take(values, np.arange(1, values.shape[axis], 2), axis=axis)
    average = np.trunc((even + odd) / SQRT2).astype(np.int64)
    difference = np.trunc((even - odd) / SQRT2).astype(np.int64)
    return np.concatenate([average, difference], axis=axis)


def _inverse_pairs(values: np.ndarray, axis: int) -> np.ndarray:
    """Interleave (avg + diff, avg - diff) pairs back along ``axis``."""
    half = values.shape[axis] // 2
    average = np.take(values, np.arange(half), axis=axis)
    difference = np.take(values, np.arange(half, 2 * half), axis=axis)
    first = np.trunc((average + difference) / SQRT2).astype(np.int64)
    second = np.trunc((average - difference) / SQRT2).astype(np.int64)

    out = np.empty_like(values)
    index = [slice(None)] * values.ndim
    index[axis] = slice(0, None, 2)
    out[tuple(index)] = first
    index[axis] = slice(1, None, 2)
    out[tuple(index)] = second
    return out


def haar_forward(channel: np.ndarray) -> np.ndarray:
    """
    Multi-level forward transform of one square channel.

    Args:
        channel: int array of shape (side, side), side a power of two

    Returns:
        New coefficient array of the same shape
    """
    coefficients = channel.astype(np.int64, copy=True)
    size = coefficients.shape[0]
    while size > 1:
        block = coefficients[:size, :size]
        block = _forward_pairs(block, axis=1)  # rows
        block = _forward_pairs(block, axis=0)  # columns
        coefficients[:size, :size] = block
        size //= 2
    return coefficients


def haar_inverse(coefficients: np.ndarray) -> np.ndarray:
    """Inverse of ``haar_forward`` (up to truncation loss)."""
    channel = coefficients.astype(np.int64, copy=True)
    side = channel.shape[0]
    size = 2
    while size <= side:
        block = channel[:size, :size]
        block = _inverse_pairs(block, axis=0)  # columns
        block = _inverse_pairs(block, axis=1)  # rows
        channel[:size, :size] = block
        size *= 2
    return channel


def threshold_coefficients(coefficients: np.ndarray, percentage: int) -> np.ndarray:
    """
    Discard the smallest coefficients across all channels.

    The absolute values of the n nonzero coefficients form one pool. Of those,
    k = trunc(n * (1 - percentage / 100)) are retained: the threshold is the
    smallest of the k largest magnitudes, and every coefficient whose
    magnitude is <= threshold becomes zero. k = 0 clears the grid.

    Args:
        coefficients: int array of any shape
        percentage: Share of coefficients to discard, 0-100

    Returns:
        Thresholded copy
    """
    result = coefficients.copy()
    magnitudes = np.abs(result)
    pool = magnitudes[magnitudes != 0]
    count = pool.size
    if count == 0:
        return result

    keep = int(count * (1 - percentage / 100.0))
    if keep <= 0:
        result[:] = 0
        return result

    threshold = np.partition(pool, count - keep)[count - keep]
    result[magnitudes <= threshold] = 0
    logger.debug(f"Haar threshold {threshold}: keeping {keep} of {count} coefficients")
    return result


def compress(image: PixelBuffer, percentage: int) -> PixelBuffer:
    """
    Compress an image by discarding a percentage of its Haar coefficients.

    Args:
        image: Source buffer
        percentage: Share of nonzero coefficients to discard, 0-100

    Returns:
        Reconstructed buffer of the original size

    Raises:
        OutOfRangeError: If percentage is outside [0, 100]
    """
    check_percentage(percentage, upper=WaveletConstants.MAX_PERCENTAGE)

    grid = pad_to_square(image)
    coefficients = np.stack([haar_forward(grid[..., c]) for c in range(3)], axis=-1)
    coefficients = threshold_coefficients(coefficients, percentage)
    restored = np.stack([haar_inverse(coefficients[..., c]) for c in range(3)], axis=-1)

    return PixelBuffer(restored[: image.height, : image.width])
