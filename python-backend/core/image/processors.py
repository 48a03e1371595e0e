"""
Image processing helpers for the API layer.

Handles preview tasks that sit outside the edit engine:
- Thumbnail creation
"""

import logging
from typing import Tuple

import cv2

from core.constants import ImageConstants
from core.image.converters import ImageConverters
from core.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class ImageProcessors:
    """Preview-oriented image operations."""

    @staticmethod
    def create_thumbnail(
        image: PixelBuffer,
        width: int = ImageConstants.DEFAULT_THUMBNAIL_WIDTH,
        format: str = "JPEG",
    ) -> Tuple[PixelBuffer, str]:
        """
        Create a preview thumbnail, keeping the aspect ratio.

        Images narrower than ``width`` are not enlarged.

        Args:
            image: Source buffer
            width: Maximum thumbnail width in pixels
            format: Encoding of the base64 payload (JPEG or PNG)

        Returns:
            Tuple of (thumbnail buffer, thumbnail as base64 string)
        """
        try:
            if image.width > width:
                height = max(1, int(image.height * width / image.width))
                resized = cv2.resize(
                    image.to_array(dtype="uint8"), (width, height), interpolation=cv2.INTER_AREA
                )
                thumbnail = PixelBuffer(resized)
            else:
                thumbnail = image

            thumb_base64 = ImageConverters.to_base64(
                thumbnail, format=format, quality=ImageConstants.THUMBNAIL_JPEG_QUALITY
            )
            return thumbnail, thumb_base64

        except Exception as e:
            logger.error(f"Failed to create thumbnail: {e}")
            raise
