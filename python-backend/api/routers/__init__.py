"""
API Routers for Raster Workbench
"""

from . import edit, image, system

__all__ = ["edit", "image", "system"]
