"""
File codec - PixelBuffers to and from disk.

Formats:
- .ppm: plain-text P3 (magic, width, height, maxval 255, then row-major RGB)
- .png / .jpg / .jpeg: via Pillow
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from core.constants import CodecConstants
from core.exceptions import CodecError, UnsupportedFormatError
from core.image.converters import ImageConverters
from core.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _extension(path: Path) -> str:
    extension = path.suffix.lower()
    if extension not in CodecConstants.supported_extensions():
        raise UnsupportedFormatError(
            f"Unsupported file extension '{extension}'. "
            f"Use one of: {', '.join(CodecConstants.supported_extensions())}"
        )
    return extension


def parse_ppm(text: str) -> PixelBuffer:
    """
    Parse plain-text P3 content.

    Raises:
        CodecError: On a missing magic number, truncated data or bad tokens
    """
    tokens = text.split()
    if not tokens or tokens[0] != CodecConstants.PPM_MAGIC:
        raise CodecError("Invalid PPM file: must begin with P3")

    try:
        width, height, _max_value = (int(t) for t in tokens[1:4])
        values = [int(t) for t in tokens[4 : 4 + width * height * 3]]
    except ValueError as e:
        raise CodecError(f"Invalid PPM file: {e}") from e

    if width <= 0 or height <= 0:
        raise CodecError(f"Invalid PPM dimensions {width}x{height}")
    if len(values) < width * height * 3:
        raise CodecError(
            f"Invalid PPM file: expected {width * height * 3} values, found {len(values)}"
        )

    return PixelBuffer(np.array(values, dtype=np.int64).reshape(height, width, 3))


def format_ppm(image: PixelBuffer) -> str:
    """Serialize as P3: header lines, then one channel value per line."""
    lines = [
        CodecConstants.PPM_MAGIC,
        f"{image.width} {image.height}",
        str(CodecConstants.PPM_MAX_VALUE),
    ]
    lines.extend(str(v) for v in image.pixels.reshape(-1).tolist())
    return "\n".join(lines) + "\n"


def read_image(path: PathLike) -> PixelBuffer:
    """
    Load an image file into a PixelBuffer.

    Raises:
        UnsupportedFormatError: Unknown extension
        CodecError: File missing or undecodable
    """
    path = Path(path)
    extension = _extension(path)
    if not path.is_file():
        raise CodecError(f"Image file not found: {path}")

    if extension in CodecConstants.PPM_EXTENSIONS:
        try:
            text = path.read_text(encoding="ascii")
        except (UnicodeDecodeError, OSError) as e:
            raise CodecError(f"Failed to read {path}: {e}") from e
        image = parse_ppm(text)
    else:
        try:
            with Image.open(path) as pil_image:
                pil_image.load()
                image = ImageConverters.pil_to_buffer(pil_image)
        except (UnidentifiedImageError, OSError) as e:
            raise CodecError(f"Failed to decode {path}: {e}") from e

    logger.info(f"Loaded {path} ({image.width}x{image.height})")
    return image


def write_image(image: PixelBuffer, path: PathLike, overwrite: bool = False) -> Path:
    """
    Save a PixelBuffer, choosing the format by extension.

    Args:
        image: Buffer to save
        path: Destination file
        overwrite: Replace an existing file instead of failing

    Returns:
        The written path

    Raises:
        UnsupportedFormatError: Unknown extension
        CodecError: File exists (without overwrite) or directory missing
    """
    path = Path(path)
    extension = _extension(path)
    if path.exists() and not overwrite:
        raise CodecError(f"File already exists at {path}. Choose a different file name.")
    if not path.parent.is_dir():
        raise CodecError(f"Directory does not exist: {path.parent}")

    if extension in CodecConstants.PPM_EXTENSIONS:
        path.write_text(format_ppm(image))
    else:
        pil_format = CodecConstants.PIL_FORMATS[extension]
        save_kwargs = {"format": pil_format}
        if pil_format == "JPEG":
            save_kwargs["quality"] = CodecConstants.JPEG_QUALITY
        ImageConverters.buffer_to_pil(image).save(path, **save_kwargs)

    logger.info(f"Saved {image.width}x{image.height} image to {path}")
    return path
