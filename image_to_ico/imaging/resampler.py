"""Square resampling of a source raster to icon side lengths."""

from __future__ import annotations

from loguru import logger
from PIL import Image

from image_to_ico.errors import InvalidDimensions
from image_to_ico.imaging.raster import Raster

# ``nearest`` is the cheap baseline: blocky when downscaling photos and
# blurry edges are not smoothed. The others interpolate; lanczos gives the
# sharpest result for the large reductions typical of icons.
RESAMPLING_FILTERS: dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}

DEFAULT_RESAMPLE = "lanczos"


def resolve_filter(name: str) -> Image.Resampling:
    """Map a filter name to a Pillow resampling constant.

    Raises:
        ValueError: If the name is not one of ``RESAMPLING_FILTERS``.
    """
    try:
        return RESAMPLING_FILTERS[name.lower()]
    except (KeyError, AttributeError):
        choices = ", ".join(RESAMPLING_FILTERS)
        raise ValueError(f"Unknown resampling filter {name!r} (choose from {choices})") from None


def resize(source: Raster, target_side: int, resample: str = DEFAULT_RESAMPLE) -> Raster:
    """Scale ``source`` to a ``target_side`` x ``target_side`` raster.

    Width and height are scaled independently, so non-square sources are
    stretched rather than cropped or padded. Upscaling is allowed.

    Args:
        source: Raster to scale; left untouched.
        target_side: Side length of the square output, in pixels.
        resample: Name of the interpolation filter.

    Returns:
        A new square RGBA raster.

    Raises:
        InvalidDimensions: If the source has a zero dimension or the target
            side is not positive.
        ValueError: If ``resample`` is unknown.
    """
    if source.is_empty:
        raise InvalidDimensions(
            f"Cannot resize an image with zero-sized dimensions: {source.width}x{source.height}"
        )
    if target_side <= 0:
        raise InvalidDimensions(f"Target side must be positive, got {target_side}")

    pil_filter = resolve_filter(resample)
    image = source.to_pil()
    if image.size != (target_side, target_side):
        image = image.resize((target_side, target_side), pil_filter)

    logger.debug(
        f"Resized {source.width}x{source.height} -> {target_side}x{target_side} ({resample})"
    )
    return Raster.from_pil(image)
