"""
Constants and configuration values for the Raster Workbench engine.
Centralizes kernels, color matrices and other magic numbers.
"""

import math


# Pixel / image constants
class ImageConstants:
    """Constants related to pixel storage."""

    CHANNELS = 3
    MIN_VALUE = 0
    MAX_VALUE = 255
    LEVELS = 256

    # Preview thumbnails served by the API
    DEFAULT_THUMBNAIL_WIDTH = 320
    MIN_THUMBNAIL_WIDTH = 16
    MAX_THUMBNAIL_WIDTH = 2000
    THUMBNAIL_JPEG_QUALITY = 70


# Color transform constants
class ColorConstants:
    """Integer-scaled color weights (exact floor arithmetic, no float drift)."""

    # BT.709 luma weights scaled by LUMA_SCALE: 0.2126, 0.7152, 0.0722
    LUMA_WEIGHTS = (2126, 7152, 722)
    LUMA_SCALE = 10000

    # Sepia matrix scaled by SEPIA_SCALE, rows produce R, G, B
    SEPIA_MATRIX = (
        (393, 769, 189),
        (349, 686, 168),
        (272, 534, 131),
    )
    SEPIA_SCALE = 1000


# Spatial filter constants
class FilterConstants:
    """Convolution kernels and their fixed divisors."""

    BLUR_KERNEL = (
        (1, 2, 1),
        (2, 4, 2),
        (1, 2, 1),
    )
    BLUR_DIVISOR = 16

    SHARPEN_KERNEL = (
        (-1, -1, -1, -1, -1),
        (-1, 2, 2, 2, -1),
        (-1, 2, 8, 2, -1),
        (-1, 2, 2, 2, -1),
        (-1, -1, -1, -1, -1),
    )
    SHARPEN_DIVISOR = 8


# Histogram constants
class HistogramConstants:
    """Histogram chart rendering."""

    CHART_WIDTH = 256
    CHART_HEIGHT = 256
    TOP_MARGIN = 10
    BACKGROUND = (255, 255, 255)

    # RGB order, matches PixelBuffer channel order
    CHANNEL_COLORS = (
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
    )


# Levels adjustment constants
class LevelsConstants:
    """Target outputs of the three control points."""

    BLACK_OUTPUT = 0
    MID_OUTPUT = 128
    WHITE_OUTPUT = 255


# Wavelet compression constants
class WaveletConstants:
    """Haar transform parameters."""

    SQRT2 = math.sqrt(2)
    MIN_PERCENTAGE = 0
    MAX_PERCENTAGE = 100


# Codec constants
class CodecConstants:
    """File formats understood by the codec."""

    PPM_MAGIC = "P3"
    PPM_MAX_VALUE = 255
    PPM_EXTENSIONS = [".ppm"]
    PIL_FORMATS = {".png": "PNG", ".jpg": "JPEG", ".jpeg": "JPEG"}
    JPEG_QUALITY = 95
    DEFAULT_TRANSPORT_FORMAT = "PNG"

    @classmethod
    def supported_extensions(cls) -> list:
        return cls.PPM_EXTENSIONS + list(cls.PIL_FORMATS)


# API Constants
class APIConstants:
    """Constants for API endpoints."""

    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000
    MAX_NAME_LENGTH = 128
