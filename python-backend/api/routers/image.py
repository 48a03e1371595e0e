"""
Image API Router - Registry load/save/upload and inspection
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_config, get_image_service, get_registry_lock
from api.exceptions import safe_endpoint
from core.constants import ImageConstants
from schemas import (
    HistogramResponse,
    ImageInfo,
    ImageListResponse,
    LoadRequest,
    Pixel,
    PreviewResponse,
    SaveRequest,
    SaveResponse,
    UploadRequest,
)

router = APIRouter()


@router.post("/load")
@safe_endpoint
def load_image(
    request: LoadRequest,
    image_service=Depends(get_image_service),
    registry_lock=Depends(get_registry_lock),
) -> ImageInfo:
    """Read a .ppm/.png/.jpg file from the workspace into the registry"""
    with registry_lock:
        image_service.load(request.path, request.name)
        return ImageInfo(**image_service.get_info(request.name))


@router.post("/save")
@safe_endpoint
def save_image(
    request: SaveRequest,
    image_service=Depends(get_image_service),
    registry_lock=Depends(get_registry_lock),
) -> SaveResponse:
    """Write a registry image to a file; refuses to overwrite unless asked"""
    with registry_lock:
        path = image_service.save(request.name, request.path, overwrite=request.overwrite)
    return SaveResponse(name=request.name, path=str(path))


@router.post("/upload")
@safe_endpoint
def upload_image(
    request: UploadRequest,
    image_service=Depends(get_image_service),
    registry_lock=Depends(get_registry_lock),
) -> ImageInfo:
    """Register a base64-encoded PNG or JPEG"""
    with registry_lock:
        image_service.upload(request.name, request.image_base64)
        return ImageInfo(**image_service.get_info(request.name))


@router.get("")
@safe_endpoint
def list_images(
    image_service=Depends(get_image_service),
    registry_lock=Depends(get_registry_lock),
) -> ImageListResponse:
    """List registered images in insertion order"""
    with registry_lock:
        images = [ImageInfo(**info) for info in image_service.list_images()]
    return ImageListResponse(images=images, count=len(images))


@router.get("/{name}")
@safe_endpoint
def get_image_info(
    name: str,
    image_service=Depends(get_image_service),
    registry_lock=Depends(get_registry_lock),
) -> ImageInfo:
    with registry_lock:
        return ImageInfo(**image_service.get_info(name))


@router.get("/{name}/pixel")
@safe_endpoint
def get_pixel(
    name: str,
    x: int = Query(..., description="Column"),
    y: int = Query(..., description="Row"),
    image_service=Depends(get_image_service),
    registry_lock=Depends(get_registry_lock),
) -> Pixel:
    """Read one pixel; coordinates outside the image give 422"""
    with registry_lock:
        rgb = image_service.get_pixel(name, x, y)
    return Pixel(x=x, y=y, rgb=list(rgb))


@router.get("/{name}/preview")
@safe_endpoint
def get_preview(
    name: str,
    width: Optional[int] = Query(
        None,
        ge=ImageConstants.MIN_THUMBNAIL_WIDTH,
        le=ImageConstants.MAX_THUMBNAIL_WIDTH,
        description="Thumbnail width (default from config)",
    ),
    image_service=Depends(get_image_service),
    registry_lock=Depends(get_registry_lock),
    config=Depends(get_config),
) -> PreviewResponse:
    """Thumbnail of a registry image as base64"""
    preview_format = config.get("image", {}).get("preview_format", "JPEG")
    with registry_lock:
        thumbnail, thumbnail_base64 = image_service.get_preview(
            name, width=width, format=preview_format
        )
    return PreviewResponse(
        name=name,
        width=thumbnail.width,
        height=thumbnail.height,
        thumbnail_base64=thumbnail_base64,
        format=preview_format,
    )


@router.get("/{name}/histogram")
@safe_endpoint
def get_histogram(
    name: str,
    image_service=Depends(get_image_service),
    registry_lock=Depends(get_registry_lock),
) -> HistogramResponse:
    """Per-channel value counts (256 bins each) and the peak of each channel"""
    with registry_lock:
        histogram = image_service.get_histogram(name)
    counts = histogram.to_dict()
    return HistogramResponse(name=name, peaks=list(histogram.peaks()), **counts)
