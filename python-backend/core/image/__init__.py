"""
Image I/O utilities.

This package provides the collaborators around the edit engine:
- converters: PixelBuffer <-> PIL / base64
- codec: P3 text, PNG and JPEG files
- processors: preview thumbnails
"""

from core.image.codec import format_ppm, parse_ppm, read_image, write_image
from core.image.converters import ImageConverters
from core.image.processors import ImageProcessors

__all__ = [
    "ImageConverters",
    "ImageProcessors",
    "format_ppm",
    "parse_ppm",
    "read_image",
    "write_image",
]
