"""
Image format conversion utilities.

Handles conversions between:
- PixelBuffers (RGB, uint8)
- PIL Images
- Base64 encoded strings
"""

import base64
import binascii
import io
import logging
from typing import Union

from PIL import Image, UnidentifiedImageError

from core.constants import CodecConstants
from core.exceptions import CodecError
from core.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image formats."""

    @staticmethod
    def buffer_to_pil(image: PixelBuffer) -> Image.Image:
        """
        Convert a PixelBuffer to an RGB PIL Image.

        Args:
            image: Source buffer

        Returns:
            PIL Image in RGB mode
        """
        # (h, w, 3) uint8 is inferred as RGB
        return Image.fromarray(image.to_array(dtype="uint8"))

    @staticmethod
    def pil_to_buffer(image: Image.Image) -> PixelBuffer:
        """
        Convert a PIL Image to a PixelBuffer.

        Palette, greyscale and alpha images are converted to plain RGB first.
        """
        if image.mode != "RGB":
            image = image.convert("RGB")
        return PixelBuffer(image)

    @staticmethod
    def to_base64(
        image: Union[PixelBuffer, Image.Image, bytes],
        format: str = CodecConstants.DEFAULT_TRANSPORT_FORMAT,
        quality: int = 85,
    ) -> str:
        """
        Convert image to base64 string.

        Args:
            image: Input image (PixelBuffer, PIL Image, or raw bytes)
            format: Image format (PNG, JPEG)
            quality: JPEG quality (1-100, ignored for PNG)

        Returns:
            Base64 encoded string
        """
        try:
            # If already bytes, directly encode
            if isinstance(image, bytes):
                return base64.b64encode(image).decode("utf-8")

            if isinstance(image, PixelBuffer):
                image = ImageConverters.buffer_to_pil(image)

            buffer = io.BytesIO()
            save_kwargs = {"format": format}

            if format.upper() == "JPEG":
                save_kwargs["quality"] = quality
                save_kwargs["optimize"] = True

            image.save(buffer, **save_kwargs)
            return base64.b64encode(buffer.getvalue()).decode("utf-8")

        except Exception as e:
            logger.error(f"Failed to convert image to base64: {e}")
            raise

    @staticmethod
    def from_base64(base64_string: str) -> PixelBuffer:
        """
        Decode a base64 PNG/JPEG payload into a PixelBuffer.

        Raises:
            CodecError: If the payload is not valid base64 or not an image
        """
        if base64_string.startswith("data:") and "," in base64_string:
            base64_string = base64_string.split(",", 1)[1]

        try:
            image_bytes = base64.b64decode(base64_string, validate=True)
            with Image.open(io.BytesIO(image_bytes)) as image:
                image.load()
                return ImageConverters.pil_to_buffer(image)
        except (binascii.Error, UnidentifiedImageError, OSError) as e:
            logger.warning(f"Failed to decode base64 image: {e}")
            raise CodecError(f"Invalid base64 image payload: {e}") from e
