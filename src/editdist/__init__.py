"""Levenshtein edit distance with a rolling column and threshold cutoff."""
from importlib.metadata import version, PackageNotFoundError

from .config import EngineSettings, SettingsNotFoundError, load_settings
from .engine import (
    InvalidThresholdError,
    compute,
    distance,
    distance_bounded,
    within_distance,
)

try:
    __version__ = version("editdist")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "EngineSettings",
    "InvalidThresholdError",
    "SettingsNotFoundError",
    "compute",
    "distance",
    "distance_bounded",
    "load_settings",
    "within_distance",
]
