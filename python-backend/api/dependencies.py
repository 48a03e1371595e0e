"""
Shared FastAPI dependencies for the Raster Workbench API.
Centralizes access to the registry, its lock and the services.
"""

import logging
import threading
from typing import Any, Dict

from fastapi import Depends, HTTPException, Request

from core.registry import ImageRegistry
from services.edit_service import EditService
from services.image_service import ImageService

logger = logging.getLogger(__name__)


def _state(request: Request, attr: str):
    try:
        return getattr(request.app.state, attr)
    except AttributeError as e:
        logger.error(f"{attr} not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail=f"Internal server error: {attr} not initialized"
        )


def get_registry(request: Request) -> ImageRegistry:
    """Get the session ImageRegistry."""
    return _state(request, "registry")


def get_registry_lock(request: Request) -> threading.RLock:
    """
    Get the lock guarding the registry.

    Routers hold it around every block that reads or writes the registry.
    Those endpoints are plain functions, so they run on the threadpool.
    """
    return _state(request, "registry_lock")


def get_config(request: Request) -> Dict[str, Any]:
    """Get application configuration as a dict."""
    try:
        return request.app.state.config
    except AttributeError:
        logger.warning("Config not found in app state, using defaults")
        return {}


def get_edit_service(request: Request, registry: ImageRegistry = Depends(get_registry)) -> EditService:
    """
    Get edit service instance.

    Upscaling follows the ``image.allow_upscale`` setting.
    """
    allow_upscale = get_config(request).get("image", {}).get("allow_upscale", False)
    return EditService(registry=registry, allow_upscale=allow_upscale)


def get_image_service(request: Request, registry: ImageRegistry = Depends(get_registry)) -> ImageService:
    """Get image service instance bound to the configured workspace."""
    image_config = get_config(request).get("image", {})
    kwargs = {}
    if "thumbnail_width" in image_config:
        kwargs["thumbnail_width"] = image_config["thumbnail_width"]
    return ImageService(registry=registry, workspace=image_config.get("workspace_dir"), **kwargs)
