"""In-memory RGBA raster shared by the decoder, resampler and encoder."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from image_to_ico.errors import InvalidDimensions

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class Raster:
    """Immutable RGBA8 pixel grid.

    Fields:
        width: Width in pixels.
        height: Height in pixels.
        pixels: Row-major RGBA bytes, ``width * height * 4`` long.

    A zero width or height is representable so that the resampler can
    reject it with a proper error rather than failing on construction.
    """

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidDimensions(
                f"Raster dimensions must not be negative: {self.width}x{self.height}"
            )
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.pixels) != expected:
            raise InvalidDimensions(
                f"Pixel buffer holds {len(self.pixels)} bytes, "
                f"expected {expected} for {self.width}x{self.height} RGBA"
            )

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    @classmethod
    def from_pil(cls, image: Image.Image) -> "Raster":
        """Build a raster from any Pillow image, converting it to RGBA."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        width, height = image.size
        return cls(width=width, height=height, pixels=image.tobytes())

    def to_pil(self) -> Image.Image:
        """Return a new Pillow image in mode RGBA holding these pixels."""
        return Image.frombytes("RGBA", (self.width, self.height), self.pixels)

    def alpha(self) -> bytes:
        """Return the alpha plane, one byte per pixel."""
        return self.pixels[3::BYTES_PER_PIXEL]


# The decoder hands the pipeline a raster; the name documents its role.
SourceImage = Raster
