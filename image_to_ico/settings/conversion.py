"""Persistent default conversion settings for image-to-ico."""

from __future__ import annotations

import json
from typing import Any

from loguru import logger

from image_to_ico.container.layout import MAX_SIDE
from image_to_ico.imaging.resampler import DEFAULT_RESAMPLE, RESAMPLING_FILTERS
from image_to_ico.pipeline.orchestrator import DEFAULT_SIZES
from image_to_ico.settings.common import app_config_dir

CONVERSION_STORE_VERSION = 1


def _conversion_store_path():
    return app_config_dir() / "conversion.json"


def get_default_conversion_settings() -> dict[str, Any]:
    """Return the default conversion settings."""
    return {
        "version": CONVERSION_STORE_VERSION,
        "sizes": list(DEFAULT_SIZES),
        "resample": DEFAULT_RESAMPLE,
        "max_workers": None,
    }


def _valid_sizes(value: Any) -> bool:
    if not isinstance(value, list) or not value:
        return False
    return all(
        isinstance(size, int) and not isinstance(size, bool) and 1 <= size <= MAX_SIDE
        for size in value
    )


def load_conversion_settings() -> dict[str, Any]:
    """Load persisted conversion settings, falling back to defaults."""
    path = _conversion_store_path()
    defaults = get_default_conversion_settings()

    if not path.exists():
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception as exc:
        logger.warning(f"Failed to read conversion settings: {exc}")
        return defaults

    if not isinstance(data, dict):
        return defaults

    # Merge loaded values over defaults so new keys are always present
    merged = dict(defaults)
    if _valid_sizes(data.get("sizes")):
        merged["sizes"] = list(data["sizes"])
    if isinstance(data.get("resample"), str) and data["resample"].lower() in RESAMPLING_FILTERS:
        merged["resample"] = data["resample"].lower()
    workers = data.get("max_workers")
    if workers is None or (
        isinstance(workers, int) and not isinstance(workers, bool) and workers >= 1
    ):
        merged["max_workers"] = workers

    return merged


def save_conversion_settings(settings: dict[str, Any]) -> None:
    """Persist conversion settings to disk."""
    payload = {
        "version": CONVERSION_STORE_VERSION,
        "sizes": list(settings.get("sizes", DEFAULT_SIZES)),
        "resample": settings.get("resample", DEFAULT_RESAMPLE),
        "max_workers": settings.get("max_workers"),
    }
    path = _conversion_store_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
