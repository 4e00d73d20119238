"""Raster decoding, resampling and frame encoding.

This package provides:
- Raster: immutable RGBA pixel grid
- decode_image / load_image: Pillow-backed input decoding
- resize: square resampling to icon sizes
- encode / encode_frame: lossless PNG frame payloads
"""

from .decoder import decode_image, load_image
from .encoder import MAX_ENCODABLE_SIDE, Frame, encode, encode_frame
from .raster import Raster, SourceImage
from .resampler import DEFAULT_RESAMPLE, RESAMPLING_FILTERS, resize, resolve_filter

__all__ = [
    # Raster
    "Raster",
    "SourceImage",
    # Decoder
    "decode_image",
    "load_image",
    # Resampler
    "DEFAULT_RESAMPLE",
    "RESAMPLING_FILTERS",
    "resize",
    "resolve_filter",
    # Encoder
    "MAX_ENCODABLE_SIDE",
    "Frame",
    "encode",
    "encode_frame",
]
