"""
Centralized enums for the Raster Workbench engine.

Shared by the imaging algorithms, the edit service and the API schemas.
"""

from enum import Enum


class Component(str, Enum):
    """Single-channel projections replicated into all three channels"""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    VALUE = "value"
    LUMA = "luma"
    INTENSITY = "intensity"


class FlipAxis(str, Enum):
    """Mirror direction"""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class OperationKind(str, Enum):
    """Closed set of edit operations understood by the edit service"""

    COMPONENT = "component"
    GREYSCALE = "greyscale"
    SEPIA = "sepia"
    BRIGHTEN = "brighten"
    DARKEN = "darken"
    BLUR = "blur"
    SHARPEN = "sharpen"
    HORIZONTAL_FLIP = "horizontal-flip"
    VERTICAL_FLIP = "vertical-flip"
    RGB_SPLIT = "rgb-split"
    RGB_COMBINE = "rgb-combine"
    HISTOGRAM = "histogram"
    COLOR_CORRECT = "color-correct"
    LEVELS_ADJUST = "levels-adjust"
    COMPRESS = "compress"
    DOWNSCALE = "downscale"
