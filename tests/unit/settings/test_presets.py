"""Tests for bundled size presets."""

import pytest

from image_to_ico.pipeline.orchestrator import DEFAULT_SIZES, validate_sizes
from image_to_ico.settings import presets
from image_to_ico.settings.presets import get_preset_sizes, list_presets


def test_bundled_presets():
    names = set(list_presets())
    assert {"windows", "favicon", "shortcut", "minimal"} <= names


def test_windows_matches_default_sizes():
    assert tuple(get_preset_sizes("windows")) == DEFAULT_SIZES


def test_every_preset_is_a_valid_size_list():
    for name, config in list_presets().items():
        assert validate_sizes(config["sizes"]), name
        assert isinstance(config["description"], str)


def test_unknown_preset():
    with pytest.raises(KeyError, match="Unknown size preset"):
        get_preset_sizes("mac")


def test_returns_copy():
    sizes = get_preset_sizes("favicon")
    sizes.append(999)
    assert 999 not in get_preset_sizes("favicon")


def test_missing_manifest_gives_no_presets(tmp_path, monkeypatch):
    monkeypatch.setattr(presets, "PRESETS_PATH", tmp_path / "missing.yaml")
    assert list_presets() == {}
    with pytest.raises(KeyError):
        get_preset_sizes("windows")


def test_invalid_entries_are_skipped(tmp_path):
    manifest = tmp_path / "presets.yaml"
    manifest.write_text(
        "presets:\n"
        "  good:\n"
        "    sizes: [16, 32]\n"
        "  bad:\n"
        "    sizes: sixteen\n"
        "  worse: 42\n",
        encoding="utf-8",
    )
    loaded = presets._load_manifest(manifest)
    assert loaded == {"good": {"description": "", "sizes": [16, 32]}}


def test_malformed_yaml(tmp_path):
    manifest = tmp_path / "presets.yaml"
    manifest.write_text("presets: [unclosed", encoding="utf-8")
    assert presets._load_manifest(manifest) == {}
