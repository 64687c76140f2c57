"""Pydantic data models for Transcope."""

from transcope.models.config import ConfidenceConfig, ScopeConfig, Settings
from transcope.models.transcript import Segment, Transcript, Word

__all__ = [
    "ConfidenceConfig",
    "ScopeConfig",
    "Settings",
    "Segment",
    "Transcript",
    "Word",
]
