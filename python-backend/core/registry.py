"""
Image Registry - named store of PixelBuffers for one session
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List

from core.exceptions import DuplicateNameError, ImageNotFoundError
from core.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


@dataclass
class RegistryEntry:
    """Single named image"""

    name: str
    image: PixelBuffer
    created_at: datetime
    origin: str  # operation or source that produced the image


class ImageRegistry:
    """
    Session-scoped mapping from unique name to PixelBuffer.

    Names are write-once: adding an existing name fails and the stored image is
    left untouched. The registry does no locking of its own; callers sharing it
    across threads must serialize access.
    """

    def __init__(self):
        self._entries: Dict[str, RegistryEntry] = {}
        self.total_added = 0
        logger.info("Image registry initialized")

    def add(self, name: str, image: PixelBuffer, origin: str = "external") -> None:
        """
        Insert an image under a new name

        Args:
            name: Unique image name
            image: Buffer to store
            origin: Free-form label of what produced the image

        Raises:
            DuplicateNameError: If the name is already taken
        """
        if name in self._entries:
            raise DuplicateNameError(name)

        self._entries[name] = RegistryEntry(
            name=name, image=image, created_at=datetime.now(), origin=origin
        )
        self.total_added += 1
        logger.debug(f"Registered {name} ({image.width}x{image.height}) from {origin}")

    def get(self, name: str) -> PixelBuffer:
        """
        Look up an image by name

        Raises:
            ImageNotFoundError: If no image has that name
        """
        entry = self._entries.get(name)
        if entry is None:
            raise ImageNotFoundError(name)
        return entry.image

    def get_entry(self, name: str) -> RegistryEntry:
        entry = self._entries.get(name)
        if entry is None:
            raise ImageNotFoundError(name)
        return entry

    def require_absent(self, *names: str) -> None:
        """Fail with DuplicateNameError if any of the names is already taken."""
        for name in names:
            if name in self._entries:
                raise DuplicateNameError(name)

    def names(self) -> List[str]:
        """Names in insertion order"""
        return list(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def get_statistics(self) -> Dict[str, Any]:
        """Get registry usage statistics"""
        images = [e.image for e in self._entries.values()]
        return {
            "count": len(images),
            "total_added": self.total_added,
            "total_pixels": sum(img.width * img.height for img in images),
            "memory_mb": round(sum(img.nbytes for img in images) / 1024 / 1024, 3),
        }

    def export_to_dict(self) -> Dict[str, Any]:
        """Describe stored images (metadata only, no pixel data)"""
        return {
            "images": [
                {
                    "name": e.name,
                    "width": e.image.width,
                    "height": e.image.height,
                    "origin": e.origin,
                    "created_at": e.created_at.isoformat(),
                }
                for e in self._entries.values()
            ],
            "statistics": self.get_statistics(),
        }
