"""Named icon size presets bundled with image-to-ico."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

PRESETS_PATH = Path(__file__).resolve().parent / "presets.yaml"


def _load_manifest(path: Path | None = None) -> dict[str, dict[str, Any]]:
    path = path or PRESETS_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            manifest = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning(f"Failed to read size presets: {exc}")
        return {}

    presets = manifest.get("presets", {}) if isinstance(manifest, dict) else {}
    if not isinstance(presets, dict):
        return {}

    valid: dict[str, dict[str, Any]] = {}
    for name, config in presets.items():
        if not isinstance(name, str) or not isinstance(config, dict):
            continue
        sizes = config.get("sizes")
        if not isinstance(sizes, list) or not all(isinstance(s, int) for s in sizes):
            logger.warning(f"Ignoring preset {name!r}: sizes must be a list of integers")
            continue
        valid[name] = {"description": str(config.get("description", "")), "sizes": sizes}
    return valid


def list_presets() -> dict[str, dict[str, Any]]:
    """Return all presets as ``{name: {"description": ..., "sizes": [...]}}``."""
    return _load_manifest()


def get_preset_sizes(name: str) -> list[int]:
    """Return the size list of a preset.

    Raises:
        KeyError: If no preset with that name exists.
    """
    presets = _load_manifest()
    if name not in presets:
        raise KeyError(f"Unknown size preset {name!r} (available: {', '.join(sorted(presets))})")
    return list(presets[name]["sizes"])
