"""Configuration models and the YAML settings loader."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from transcope.utils.io import read_yaml

DEFAULT_SETTINGS_FILE = "transcope.yaml"


class ConfidenceConfig(BaseModel):
    """Configuration for low-confidence detection."""

    percentile: float = Field(default=0.1, ge=0.0, le=1.0)
    max_threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    manual_threshold: float | None = Field(default=None, ge=0.0, le=1.0)


class ScopeConfig(BaseModel):
    """Configuration for scoping bulk AI actions."""

    exclude_confirmed: bool = True


class Settings(BaseModel):
    """Top-level settings file contents."""

    confidence: ConfidenceConfig = Field(default_factory=ConfidenceConfig)
    scope: ScopeConfig = Field(default_factory=ScopeConfig)


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from YAML.

    With no path, ``transcope.yaml`` in the working directory is used if it
    exists and defaults apply otherwise. An explicit path must exist.
    """
    if path is None:
        default = Path(DEFAULT_SETTINGS_FILE)
        if not default.exists():
            return Settings()
        path = default

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    return Settings(**read_yaml(path))
