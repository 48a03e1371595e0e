"""
Image registry API models.

This module contains models for moving images in and out of the registry:
- file load/save requests
- base64 upload
- info, preview and histogram responses
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import ImageInfo


class LoadRequest(BaseModel):
    """Load a file from the workspace into the registry"""

    path: str = Field(..., min_length=1, description="File path, relative to the workspace")
    name: str = Field(..., min_length=1, max_length=128)


class SaveRequest(BaseModel):
    """Write a registry image to a file in the workspace"""

    name: str = Field(..., min_length=1, max_length=128)
    path: str = Field(..., min_length=1, description="File path, relative to the workspace")
    overwrite: bool = False


class UploadRequest(BaseModel):
    """Register an image sent as base64 (PNG or JPEG, optional data URL prefix)"""

    name: str = Field(..., min_length=1, max_length=128)
    image_base64: str = Field(..., min_length=1)


class SaveResponse(BaseModel):
    name: str
    path: str


class ImageListResponse(BaseModel):
    images: List[ImageInfo]
    count: int


class PreviewResponse(BaseModel):
    name: str
    width: int
    height: int
    thumbnail_base64: str
    format: Optional[str] = None


class HistogramResponse(BaseModel):
    """Per-channel counts, 256 bins each"""

    name: str
    red: List[int]
    green: List[int]
    blue: List[int]
    peaks: List[int]
