"""Pipeline orchestration and icon file output."""

from .orchestrator import (
    DEFAULT_SIZES,
    ConversionPipeline,
    ConversionResult,
    PipelineState,
    convert,
    convert_file,
    validate_sizes,
    write_container,
)

__all__ = [
    "DEFAULT_SIZES",
    "ConversionPipeline",
    "ConversionResult",
    "PipelineState",
    "convert",
    "convert_file",
    "validate_sizes",
    "write_container",
]
