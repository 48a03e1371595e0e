"""
Core modules for Raster Workbench
"""

from .enums import Component, FlipAxis, OperationKind
from .pixel_buffer import PixelBuffer
from .region import FullRegion, MaskRegion, Region, SplitRegion
from .registry import ImageRegistry, RegistryEntry

__all__ = [
    "PixelBuffer",
    "ImageRegistry",
    "RegistryEntry",
    "Region",
    "FullRegion",
    "SplitRegion",
    "MaskRegion",
    "Component",
    "FlipAxis",
    "OperationKind",
]
