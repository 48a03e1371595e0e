"""
Histogram-peak color correction.

Shifts each channel so its histogram peak lands on the average of the three
channel peaks, which removes a uniform color cast.
"""

from typing import Optional, Tuple

import numpy as np

from core.pixel_buffer import PixelBuffer
from imaging.histogram import Histogram, compute_histogram


def peak_offsets(histogram: Histogram) -> Tuple[int, int, int]:
    """
    Per-channel offsets that align the peaks.

    Returns:
        (red, green, blue) offsets, ``average_peak - peak`` each
    """
    peaks = histogram.peaks()
    average_peak = sum(peaks) // 3
    return tuple(average_peak - peak for peak in peaks)


def color_correct(image: PixelBuffer, histogram: Optional[Histogram] = None) -> np.ndarray:
    """
    Apply peak-alignment offsets to every pixel.

    Args:
        image: Source buffer
        histogram: Precomputed histogram of the whole image (computed if omitted)

    Returns:
        Clamped int array of shape (height, width, 3)
    """
    if histogram is None:
        histogram = compute_histogram(image)
    offsets = np.array(peak_offsets(histogram), dtype=np.int64)
    return np.clip(image.to_array() + offsets, 0, 255)
