"""Low-confidence word detection."""
