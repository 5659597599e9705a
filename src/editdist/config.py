from __future__ import annotations

"""Engine settings and their YAML loader."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

LOGGER = logging.getLogger(__name__)


class EngineSettings(BaseModel):
    """Threshold applied by :func:`editdist.engine.compute`.

    ``max_distance`` of ``None`` means the full distance is always computed.
    """

    max_distance: Optional[int] = Field(default=None, ge=0, strict=True)


class SettingsNotFoundError(FileNotFoundError):
    """Raised when a settings file cannot be located."""


def load_settings(path: Path) -> EngineSettings:
    """Load engine settings from a YAML file."""

    if not path.exists():
        raise SettingsNotFoundError(f"No settings file at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    LOGGER.debug("Loaded settings from %s", path)
    try:
        return EngineSettings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid settings data: {exc}") from exc
