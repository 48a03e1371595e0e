"""
Image Service - moving images in and out of the registry.

Handles file load/save through the codec, base64 upload, and the read-only
views the API serves (info, pixel, preview, histogram counts).
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from core.constants import ImageConstants
from core.exceptions import OutOfRangeError
from core.image import ImageConverters, ImageProcessors, read_image, write_image
from core.pixel_buffer import Pixel, PixelBuffer
from core.registry import ImageRegistry
from imaging.histogram import Histogram, compute_histogram

logger = logging.getLogger(__name__)


class ImageService:
    """Service for registry I/O and inspection."""

    def __init__(
        self,
        registry: ImageRegistry,
        workspace: Optional[Union[str, Path]] = None,
        thumbnail_width: int = ImageConstants.DEFAULT_THUMBNAIL_WIDTH,
    ):
        """
        Initialize image service.

        Args:
            registry: Image registry shared with the edit service
            workspace: Base directory for relative file paths (default: cwd)
            thumbnail_width: Default preview width
        """
        self.registry = registry
        self.workspace = Path(workspace) if workspace else Path.cwd()
        self.thumbnail_width = thumbnail_width

    def resolve_path(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.workspace / path

    def load(self, path: Union[str, Path], name: str) -> PixelBuffer:
        """
        Read a file and register it.

        Raises:
            DuplicateNameError: Name already taken (checked before reading)
            CodecError: Unreadable or malformed file
        """
        self.registry.require_absent(name)
        resolved = self.resolve_path(path)
        image = read_image(resolved)
        self.registry.add(name, image, origin=f"load({resolved.name})")
        return image

    def save(self, name: str, path: Union[str, Path], overwrite: bool = False) -> Path:
        """Write a registered image; format follows the extension"""
        image = self.registry.get(name)
        return write_image(image, self.resolve_path(path), overwrite=overwrite)

    def upload(self, name: str, image_base64: str) -> PixelBuffer:
        """Register an image sent as base64"""
        self.registry.require_absent(name)
        image = ImageConverters.from_base64(image_base64)
        self.registry.add(name, image, origin="upload")
        logger.info(f"Uploaded {name} ({image.width}x{image.height})")
        return image

    def list_images(self) -> List[Dict[str, Any]]:
        return [self.get_info(name) for name in self.registry.names()]

    def get_info(self, name: str) -> Dict[str, Any]:
        entry = self.registry.get_entry(name)
        return {
            "name": entry.name,
            "width": entry.image.width,
            "height": entry.image.height,
            "origin": entry.origin,
        }

    def get_pixel(self, name: str, x: int, y: int) -> Pixel:
        """
        Read one pixel.

        Raises:
            ImageNotFoundError: Unknown name
            PixelOutOfRangeError: Coordinates outside the image
        """
        return self.registry.get(name).get_pixel(x, y)

    def get_preview(
        self, name: str, width: Optional[int] = None, format: str = "JPEG"
    ) -> Tuple[PixelBuffer, str]:
        """
        Thumbnail of a registered image as (buffer, base64).

        Raises:
            OutOfRangeError: Width outside the allowed thumbnail range
        """
        width = width or self.thumbnail_width
        if not ImageConstants.MIN_THUMBNAIL_WIDTH <= width <= ImageConstants.MAX_THUMBNAIL_WIDTH:
            raise OutOfRangeError(
                f"Thumbnail width {width} outside "
                f"[{ImageConstants.MIN_THUMBNAIL_WIDTH}, {ImageConstants.MAX_THUMBNAIL_WIDTH}]"
            )
        return ImageProcessors.create_thumbnail(self.registry.get(name), width=width, format=format)

    def get_histogram(self, name: str) -> Histogram:
        return compute_histogram(self.registry.get(name))
