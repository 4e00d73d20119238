"""Decode arbitrary input image bytes into an RGBA raster via Pillow."""

from __future__ import annotations

import io
from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from image_to_ico.errors import DecodeError, InvalidDimensions
from image_to_ico.imaging.raster import Raster


def decode_image(data: bytes) -> Raster:
    """Decode JPEG/PNG/GIF/BMP (or anything else Pillow reads) into a raster.

    Args:
        data: Encoded image file contents.

    Returns:
        The first frame of the image as an RGBA ``Raster``.

    Raises:
        DecodeError: If the bytes are empty, unidentified or truncated.
        InvalidDimensions: If the decoded image has a zero width or height.
    """
    if not data:
        raise DecodeError("Input image is empty")

    try:
        with Image.open(io.BytesIO(data)) as image:
            image.seek(0)
            image.load()
            source_format = image.format
            raster = Raster.from_pil(image)
    except UnidentifiedImageError as exc:
        raise DecodeError("Input is not a recognised image format") from exc
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Failed to decode input image: {exc}") from exc

    if raster.is_empty:
        raise InvalidDimensions(
            f"Decoded image has zero-sized dimensions: {raster.width}x{raster.height}"
        )

    logger.debug(f"Decoded {source_format} image, {raster.width}x{raster.height}")
    return raster


def load_image(path: str | Path) -> Raster:
    """Read an image file from disk and decode it."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise DecodeError(f"Image file not found: {path}") from exc
    except OSError as exc:
        raise DecodeError(f"Failed to read image file {path}: {exc}") from exc
    return decode_image(data)
