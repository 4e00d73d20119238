"""Lossless PNG encoding of resized rasters into embeddable icon frames."""

from __future__ import annotations

import io
from dataclasses import dataclass

from loguru import logger

from image_to_ico.errors import EncodeFailure
from image_to_ico.imaging.raster import Raster

PAYLOAD_FORMAT = "PNG"

# Width and height are stored as signed 32-bit values in the IHDR chunk.
MAX_ENCODABLE_SIDE = 2**31 - 1


@dataclass(frozen=True)
class Frame:
    """One square, encoded image destined for the icon container."""

    side: int
    payload: bytes

    @property
    def size(self) -> int:
        """Payload length in bytes."""
        return len(self.payload)


def encode(raster: Raster) -> bytes:
    """Compress a square RGBA raster into a PNG payload.

    The PNG carries no ancillary chunks, so identical rasters always give
    identical bytes. Decoding the payload yields the exact input pixels.

    Raises:
        EncodeFailure: If the raster is not square, is empty, is too large
            for PNG, or Pillow fails while writing.
    """
    side = raster.width
    if not raster.is_square:
        raise EncodeFailure(
            f"Icon frames must be square, got {raster.width}x{raster.height}", side=side
        )
    if side <= 0 or side > MAX_ENCODABLE_SIDE:
        raise EncodeFailure(f"Side {side} is outside the encodable PNG range", side=side)

    buffer = io.BytesIO()
    try:
        raster.to_pil().save(buffer, format=PAYLOAD_FORMAT, optimize=False)
    except (OSError, ValueError) as exc:
        raise EncodeFailure(f"Failed to encode {side}x{side} frame: {exc}", side=side) from exc

    payload = buffer.getvalue()
    logger.debug(f"Encoded {side}x{side} frame as {PAYLOAD_FORMAT}, {len(payload)} bytes")
    return payload


def encode_frame(raster: Raster) -> Frame:
    """Encode a raster and wrap it with its side length."""
    return Frame(side=raster.width, payload=encode(raster))
