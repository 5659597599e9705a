from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from editdist.config import EngineSettings, SettingsNotFoundError, load_settings


def test_defaults_are_unbounded() -> None:
    assert EngineSettings().max_distance is None


def test_negative_threshold_rejected() -> None:
    with pytest.raises(ValidationError):
        EngineSettings(max_distance=-1)


def test_load_settings_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("max_distance: 3\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.max_distance == 3


def test_load_empty_settings_file(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == EngineSettings()


def test_load_missing_settings_file(tmp_path: Path) -> None:
    with pytest.raises(SettingsNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_load_invalid_settings(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("max_distance: -4\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid settings data"):
        load_settings(path)
