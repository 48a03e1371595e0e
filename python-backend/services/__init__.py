"""
Service layer - business logic between the API routers and the core.
"""

from .edit_service import EditService
from .image_service import ImageService

__all__ = ["EditService", "ImageService"]
