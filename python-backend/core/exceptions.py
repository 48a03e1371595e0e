"""
Typed errors raised by the imaging engine.

Every engine operation validates its inputs and raises one of these before the
registry is touched, so a failed operation never leaves a partial result behind.
The API layer maps each class to an HTTP status (see api.exceptions).
"""

from typing import Optional, Tuple


class ImagingError(Exception):
    """Base class for all recoverable engine errors"""

    kind = "imaging_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ImageNotFoundError(ImagingError):
    """Referenced image name is not in the registry"""

    kind = "not_found"

    def __init__(self, name: str):
        super().__init__(f"Image not found: {name}")
        self.name = name


class DuplicateNameError(ImagingError):
    """Registry already holds an image under this name"""

    kind = "duplicate_name"

    def __init__(self, name: str):
        super().__init__(f"Image '{name}' already exists")
        self.name = name


class DimensionMismatchError(ImagingError):
    """Two operands that must share a size do not"""

    kind = "dimension_mismatch"

    def __init__(self, expected: Tuple[int, int], actual: Tuple[int, int], what: str = "image"):
        super().__init__(
            f"{what} is {actual[0]}x{actual[1]}, expected {expected[0]}x{expected[1]}"
        )
        self.expected = expected
        self.actual = actual


class OutOfRangeError(ImagingError):
    """A numeric parameter lies outside its permitted range"""

    kind = "out_of_range"


class PixelOutOfRangeError(OutOfRangeError):
    """Pixel coordinates outside [0, width) x [0, height)"""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Pixel ({x}, {y}) is outside a {width}x{height} image")
        self.x = x
        self.y = y


class InvalidDimensionsError(ImagingError):
    """Non-positive or otherwise unusable image dimensions"""

    kind = "invalid_dimensions"

    def __init__(self, message: str, width: Optional[int] = None, height: Optional[int] = None):
        super().__init__(message)
        self.width = width
        self.height = height


class CodecError(ImagingError):
    """A file could not be decoded or encoded"""

    kind = "codec_error"


class UnsupportedFormatError(CodecError):
    """File extension is not one the codec handles"""

    kind = "unsupported_format"


def check_percentage(percentage: int, upper: int = 100) -> int:
    """
    Validate a split/compression percentage.

    Raises:
        OutOfRangeError: If percentage is outside [0, upper]
    """
    if percentage < 0 or percentage > upper:
        raise OutOfRangeError(f"Percentage must be between 0 and {upper}, got {percentage}")
    return int(percentage)
