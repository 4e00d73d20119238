"""Shared pytest fixtures for image-to-ico tests."""

import io

import pytest
from PIL import Image

from image_to_ico.imaging.raster import Raster


@pytest.fixture(autouse=True)
def _isolated_config_dir(tmp_path, monkeypatch):
    """Keep persisted settings out of the real home directory."""
    monkeypatch.setenv("IMAGE_TO_ICO_CONFIG_DIR", str(tmp_path / "config"))


def _encode_image(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def _decode_payload(payload: bytes) -> Image.Image:
    with Image.open(io.BytesIO(payload)) as image:
        image.load()
        return image.convert("RGBA")


@pytest.fixture
def red_image():
    """64x64 opaque red RGBA image."""
    return Image.new("RGBA", (64, 64), (255, 0, 0, 255))


@pytest.fixture
def red_png(red_image):
    return _encode_image(red_image)


@pytest.fixture
def red_raster(red_image):
    return Raster.from_pil(red_image)


@pytest.fixture
def transparent_image():
    """40x40 image: transparent background, opaque blue square, half-alpha band."""
    image = Image.new("RGBA", (40, 40), (0, 0, 0, 0))
    for x in range(10, 30):
        for y in range(10, 30):
            image.putpixel((x, y), (0, 0, 255, 255))
    for x in range(40):
        image.putpixel((x, 35), (0, 200, 0, 128))
    return image


@pytest.fixture
def transparent_png(transparent_image):
    return _encode_image(transparent_image)


@pytest.fixture
def gradient_raster():
    """Non-square 30x20 raster with distinct pixel values."""
    image = Image.new("RGBA", (30, 20))
    for x in range(30):
        for y in range(20):
            image.putpixel((x, y), (x * 8, y * 12, (x + y) * 5, 255 - x * 3))
    return Raster.from_pil(image)


@pytest.fixture
def encode_image():
    """Encode a Pillow image into file bytes (PNG unless told otherwise)."""
    return _encode_image


@pytest.fixture
def decode_payload():
    """Decode a frame payload back into an RGBA Pillow image."""
    return _decode_payload
