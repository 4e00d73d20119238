"""Application settings persistence (conversion defaults, size presets)."""

from image_to_ico.settings.common import app_config_dir
from image_to_ico.settings.conversion import (
    get_default_conversion_settings,
    load_conversion_settings,
    save_conversion_settings,
)
from image_to_ico.settings.presets import get_preset_sizes, list_presets

__all__ = [
    "app_config_dir",
    # Conversion
    "get_default_conversion_settings",
    "load_conversion_settings",
    "save_conversion_settings",
    # Presets
    "get_preset_sizes",
    "list_presets",
]
