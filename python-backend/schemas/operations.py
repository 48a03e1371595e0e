"""
Edit operation request models.

One model per OperationKind, tagged by its ``kind`` field. The ``Operation``
union lets FastAPI (and ``TypeAdapter``) pick the right model from the tag:

    {"kind": "brighten", "source": "photo", "dest": "bright", "amount": 50,
     "region": {"split": 50}}
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from core.enums import Component

from .common import RegionSpec

ImageName = Annotated[str, Field(min_length=1, max_length=128)]


class _SingleSource(BaseModel):
    """Fields shared by operations that read one image and write another"""

    source: ImageName
    dest: ImageName


class _Regional(_SingleSource):
    region: Optional[RegionSpec] = Field(default=None, description="Default: whole image")


class ComponentRequest(_Regional):
    kind: Literal["component"] = "component"
    component: Component


class GreyscaleRequest(_Regional):
    kind: Literal["greyscale"] = "greyscale"


class SepiaRequest(_Regional):
    kind: Literal["sepia"] = "sepia"


class BrightenRequest(_Regional):
    kind: Literal["brighten"] = "brighten"
    amount: int = Field(..., ge=0, le=255)


class DarkenRequest(_Regional):
    kind: Literal["darken"] = "darken"
    amount: int = Field(..., ge=0, le=255)


class BlurRequest(_Regional):
    kind: Literal["blur"] = "blur"


class SharpenRequest(_Regional):
    kind: Literal["sharpen"] = "sharpen"


class HorizontalFlipRequest(_SingleSource):
    kind: Literal["horizontal-flip"] = "horizontal-flip"


class VerticalFlipRequest(_SingleSource):
    kind: Literal["vertical-flip"] = "vertical-flip"


class RGBSplitRequest(BaseModel):
    """Write the red, green and blue component images of ``source``"""

    kind: Literal["rgb-split"] = "rgb-split"
    source: ImageName
    red_dest: ImageName
    green_dest: ImageName
    blue_dest: ImageName


class RGBCombineRequest(BaseModel):
    """Take red from ``red``, green from ``green`` and blue from ``blue``"""

    kind: Literal["rgb-combine"] = "rgb-combine"
    red: ImageName
    green: ImageName
    blue: ImageName
    dest: ImageName


class HistogramRequest(_SingleSource):
    """Render the histogram chart of ``source`` as a new image"""

    kind: Literal["histogram"] = "histogram"


class ColorCorrectRequest(_Regional):
    kind: Literal["color-correct"] = "color-correct"


class LevelsAdjustRequest(_Regional):
    kind: Literal["levels-adjust"] = "levels-adjust"
    black: int = Field(..., ge=0, le=255)
    mid: int = Field(..., ge=0, le=255)
    white: int = Field(..., ge=0, le=255)


class CompressRequest(_SingleSource):
    kind: Literal["compress"] = "compress"
    percentage: int = Field(..., ge=0, le=100, description="Share of coefficients discarded")


class DownscaleRequest(_SingleSource):
    kind: Literal["downscale"] = "downscale"
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)


OperationUnion = Union[
    ComponentRequest,
    GreyscaleRequest,
    SepiaRequest,
    BrightenRequest,
    DarkenRequest,
    BlurRequest,
    SharpenRequest,
    HorizontalFlipRequest,
    VerticalFlipRequest,
    RGBSplitRequest,
    RGBCombineRequest,
    HistogramRequest,
    ColorCorrectRequest,
    LevelsAdjustRequest,
    CompressRequest,
    DownscaleRequest,
]

Operation = Annotated[OperationUnion, Field(discriminator="kind")]

operation_adapter: TypeAdapter = TypeAdapter(Operation)


def parse_operation(data: dict):
    """Validate a raw dict into the matching request model"""
    return operation_adapter.validate_python(data)


class OperationResult(BaseModel):
    """Response from an applied edit"""

    kind: str
    written: List[str] = Field(..., description="Names added to the registry")
    width: int
    height: int
    processing_time_ms: int
