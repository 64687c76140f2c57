"""Segment indexing, filtering and scoping for bulk AI actions."""
