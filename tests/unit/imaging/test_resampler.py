"""Tests for square resampling."""

import pytest
from PIL import Image

from image_to_ico.errors import InvalidDimensions
from image_to_ico.imaging.raster import Raster
from image_to_ico.imaging.resampler import RESAMPLING_FILTERS, resize, resolve_filter


def test_downscale_uniform_colour(red_raster):
    result = resize(red_raster, 16)

    assert result.size == (16, 16)
    assert result.pixels == bytes([255, 0, 0, 255]) * 16 * 16


def test_non_square_source_is_stretched(gradient_raster):
    result = resize(gradient_raster, 24)
    assert result.size == (24, 24)


def test_upscale_single_pixel_to_256():
    source = Raster(width=1, height=1, pixels=bytes([10, 20, 30, 40]))
    result = resize(source, 256)

    assert result.size == (256, 256)
    assert len(result.pixels) == 256 * 256 * 4


def test_same_size_keeps_pixels(red_raster):
    assert resize(red_raster, 64).pixels == red_raster.pixels


def test_nearest_neighbour_upscale():
    image = Image.new("RGBA", (2, 2))
    colours = [(255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255), (0, 0, 0, 0)]
    image.putdata(colours)
    result = resize(Raster.from_pil(image), 4, resample="nearest").to_pil()

    assert result.getpixel((0, 0)) == colours[0]
    assert result.getpixel((3, 0)) == colours[1]
    assert result.getpixel((0, 3)) == colours[2]
    assert result.getpixel((3, 3)) == colours[3]


@pytest.mark.parametrize("name", sorted(RESAMPLING_FILTERS))
def test_every_filter_produces_square(gradient_raster, name):
    assert resize(gradient_raster, 32, resample=name).size == (32, 32)


def test_source_left_untouched(gradient_raster):
    before = gradient_raster.pixels
    resize(gradient_raster, 48)
    assert gradient_raster.pixels == before


def test_zero_width_source_rejected():
    with pytest.raises(InvalidDimensions, match="zero-sized"):
        resize(Raster(width=0, height=4, pixels=b""), 16)


def test_zero_height_source_rejected():
    with pytest.raises(InvalidDimensions):
        resize(Raster(width=4, height=0, pixels=b""), 16)


@pytest.mark.parametrize("side", [0, -16])
def test_non_positive_target_rejected(red_raster, side):
    with pytest.raises(InvalidDimensions):
        resize(red_raster, side)


def test_unknown_filter_rejected(red_raster):
    with pytest.raises(ValueError, match="Unknown resampling filter"):
        resize(red_raster, 16, resample="sinc")


def test_resolve_filter_is_case_insensitive():
    assert resolve_filter("LANCZOS") is Image.Resampling.LANCZOS
