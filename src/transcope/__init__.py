"""Transcope: confidence thresholds and segment scoping for transcript editing."""

__version__ = "0.1.0"
