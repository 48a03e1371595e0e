"""
Histogram analysis and chart rendering.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

import cv2
import numpy as np

from core.constants import HistogramConstants, ImageConstants
from core.pixel_buffer import PixelBuffer


@dataclass(frozen=True)
class Histogram:
    """Per-channel value counts, each a length-256 int array"""

    red: np.ndarray
    green: np.ndarray
    blue: np.ndarray

    @property
    def channels(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.red, self.green, self.blue

    def peaks(self) -> Tuple[int, int, int]:
        """Most frequent value per channel; ties go to the lowest value."""
        # argmax returns the first maximum, i.e. the lowest value on ties
        return tuple(int(np.argmax(counts)) for counts in self.channels)

    def to_dict(self) -> Dict[str, List[int]]:
        return {
            "red": self.red.tolist(),
            "green": self.green.tolist(),
            "blue": self.blue.tolist(),
        }


def compute_histogram(image: PixelBuffer) -> Histogram:
    """
    Count channel values over every pixel.

    The counts of each channel sum to width * height.
    """
    pixels = image.pixels
    counts = [
        np.bincount(pixels[..., c].ravel(), minlength=ImageConstants.LEVELS).astype(np.int64)
        for c in range(ImageConstants.CHANNELS)
    ]
    return Histogram(red=counts[0], green=counts[1], blue=counts[2])


def render_histogram(histogram: Histogram) -> PixelBuffer:
    """
    Draw the three channel histograms as overlaid line charts.

    Produces a 256x256 white image. Each channel is scaled so that its tallest
    bin reaches ``height - TOP_MARGIN``; a channel with no counts is not drawn.
    Heights are measured from the bottom edge.

    Args:
        histogram: Counts to plot

    Returns:
        Chart as a PixelBuffer
    """
    width = HistogramConstants.CHART_WIDTH
    height = HistogramConstants.CHART_HEIGHT
    canvas = np.full((height, width, 3), HistogramConstants.BACKGROUND, dtype=np.uint8)

    for counts, color in zip(histogram.channels, HistogramConstants.CHANNEL_COLORS):
        peak = int(counts.max())
        scale = (height - HistogramConstants.TOP_MARGIN) / peak if peak else 0.0
        heights = (counts * scale).astype(np.int64)

        for i in range(ImageConstants.LEVELS - 1):
            h1, h2 = int(heights[i]), int(heights[i + 1])
            if h1 <= 0 and h2 <= 0:
                continue
            cv2.line(canvas, (i, height - h1 - 1), (i + 1, height - h2), color, 1, cv2.LINE_8)

    return PixelBuffer(canvas)
