"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from transcope.models.config import Settings, load_settings


def test_defaults_without_file(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = load_settings()
    assert settings == Settings()
    assert settings.confidence.percentile == 0.1
    assert settings.confidence.max_threshold == 0.4
    assert settings.confidence.manual_threshold is None
    assert settings.scope.exclude_confirmed is True


def test_reads_default_file_from_cwd(tmp_path: Path, monkeypatch):
    (tmp_path / "transcope.yaml").write_text("scope:\n  exclude_confirmed: false\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_settings().scope.exclude_confirmed is False


def test_reads_explicit_file(tmp_path: Path):
    path = tmp_path / "custom.yaml"
    path.write_text(
        "confidence:\n  percentile: 0.25\n  max_threshold: 0.5\n",
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.confidence.percentile == 0.25
    assert settings.confidence.max_threshold == 0.5


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_missing_explicit_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_out_of_range_value_rejected(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("confidence:\n  percentile: 2.0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(path)
