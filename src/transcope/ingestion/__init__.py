"""Transcript import and normalization."""
