"""
Common schemas shared by the edit and image APIs.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class RegionSpec(BaseModel):
    """
    Which pixels an operation affects.

    Give ``split`` for a split-view percentage or ``mask`` for the name of a
    mask image; leave both empty for the whole image.
    """

    split: Optional[int] = Field(
        default=None, ge=0, le=100, description="Affect the left N% of columns"
    )
    mask: Optional[str] = Field(
        default=None, min_length=1, description="Mask image name; black pixels are affected"
    )

    @model_validator(mode="after")
    def check_exclusive(self) -> "RegionSpec":
        if self.split is not None and self.mask is not None:
            raise ValueError("Specify either split or mask, not both")
        return self


class ImageInfo(BaseModel):
    """Registry entry summary"""

    name: str
    width: int
    height: int
    origin: str


class Pixel(BaseModel):
    """Single pixel value"""

    x: int
    y: int
    rgb: list[int] = Field(..., min_length=3, max_length=3)
