"""
Imaging algorithms - pure functions over PixelBuffers.

- color: channel extraction, luma/value/intensity, sepia, brightness
- filters: blur and sharpen convolution
- histogram: channel counts and chart rendering
- correction: histogram-peak color correction
- levels: quadratic tone curve
- wavelet: Haar compression
- resample: bilinear resampling
- geometry: flips and RGB split/combine
"""

from imaging.color import brightness, component, luma, sepia
from imaging.correction import color_correct
from imaging.filters import blur, sharpen
from imaging.geometry import combine_rgb, flip, split_rgb
from imaging.histogram import Histogram, compute_histogram, render_histogram
from imaging.levels import ToneCurve, fit_tone_curve, levels_adjust
from imaging.resample import resample
from imaging.wavelet import compress

__all__ = [
    "brightness",
    "component",
    "luma",
    "sepia",
    "blur",
    "sharpen",
    "Histogram",
    "compute_histogram",
    "render_histogram",
    "color_correct",
    "ToneCurve",
    "fit_tone_curve",
    "levels_adjust",
    "compress",
    "resample",
    "flip",
    "split_rgb",
    "combine_rgb",
]
