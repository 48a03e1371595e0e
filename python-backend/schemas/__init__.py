"""
Schemas Package

Pydantic schemas for request validation and response serialization, shared by
the API routers and the services.
"""

# Re-export enums from centralized location for convenience
from core.enums import Component, FlipAxis, OperationKind

# Common models
from .common import ImageInfo, Pixel, RegionSpec

# Image registry models
from .image import (
    HistogramResponse,
    ImageListResponse,
    LoadRequest,
    PreviewResponse,
    SaveRequest,
    SaveResponse,
    UploadRequest,
)

# Edit operation models
from .operations import (
    BlurRequest,
    BrightenRequest,
    ColorCorrectRequest,
    ComponentRequest,
    CompressRequest,
    DarkenRequest,
    DownscaleRequest,
    GreyscaleRequest,
    HistogramRequest,
    HorizontalFlipRequest,
    LevelsAdjustRequest,
    Operation,
    OperationResult,
    OperationUnion,
    RGBCombineRequest,
    RGBSplitRequest,
    SepiaRequest,
    SharpenRequest,
    VerticalFlipRequest,
    parse_operation,
)

# System models
from .system import SystemStatus

__all__ = [
    # Common models
    "ImageInfo",
    "Pixel",
    "RegionSpec",
    # Image models
    "LoadRequest",
    "SaveRequest",
    "SaveResponse",
    "UploadRequest",
    "ImageListResponse",
    "PreviewResponse",
    "HistogramResponse",
    # Operation models
    "Operation",
    "OperationResult",
    "OperationUnion",
    "parse_operation",
    "ComponentRequest",
    "GreyscaleRequest",
    "SepiaRequest",
    "BrightenRequest",
    "DarkenRequest",
    "BlurRequest",
    "SharpenRequest",
    "HorizontalFlipRequest",
    "VerticalFlipRequest",
    "RGBSplitRequest",
    "RGBCombineRequest",
    "HistogramRequest",
    "ColorCorrectRequest",
    "LevelsAdjustRequest",
    "CompressRequest",
    "DownscaleRequest",
    # System models
    "SystemStatus",
    # Enums (re-exported from core.enums)
    "Component",
    "FlipAxis",
    "OperationKind",
]
