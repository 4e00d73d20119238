"""Shared config directory helper."""

import os
from pathlib import Path

CONFIG_DIR_ENV = "IMAGE_TO_ICO_CONFIG_DIR"


def app_config_dir() -> Path:
    """Return the application config directory.

    ``$IMAGE_TO_ICO_CONFIG_DIR`` wins when set; otherwise the per-user
    ``~/.config/image_to_ico`` directory is used.
    """
    location = os.environ.get(CONFIG_DIR_ENV)
    if location:
        return Path(location)
    return Path.home() / ".config" / "image_to_ico"
