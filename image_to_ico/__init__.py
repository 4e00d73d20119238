"""Convert a single raster image into a multi-resolution ICO container."""

from .errors import (
    ContainerWriteError,
    ConversionError,
    CorruptContainer,
    DecodeError,
    EncodeFailure,
    InvalidDimensions,
    NoFrames,
    TooManyFrames,
)
from .pipeline import (
    DEFAULT_SIZES,
    ConversionPipeline,
    ConversionResult,
    PipelineState,
    convert,
    convert_file,
    write_container,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ConversionError",
    "ContainerWriteError",
    "CorruptContainer",
    "DecodeError",
    "EncodeFailure",
    "InvalidDimensions",
    "NoFrames",
    "TooManyFrames",
    # Pipeline
    "DEFAULT_SIZES",
    "ConversionPipeline",
    "ConversionResult",
    "PipelineState",
    "convert",
    "convert_file",
    "write_container",
]
