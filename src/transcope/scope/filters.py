"""Segment filters that produce the candidate list for scoped actions."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence

from pydantic import BaseModel, Field

from transcope.confidence.highlight import segment_has_low_confidence
from transcope.models.transcript import Segment
from transcope.utils.progress import log_step, log_warning

# Patterns that would match every segment; treated as no search
MATCH_EVERYTHING_PATTERNS = {".*", ".+", ".*.*", ".+.+"}

_WHITESPACE = re.compile(r"\s+")


class SegmentFilter(BaseModel):
    """Active filter criteria. Every set criterion must match."""

    speaker: str | None = None
    low_confidence: bool = False
    bookmarked: bool = False
    tag_ids: list[str] = Field(default_factory=list)  # any of
    not_tag_ids: list[str] = Field(default_factory=list)  # none of
    no_tags: bool = False
    query: str = ""
    regex: bool = False

    @property
    def is_active(self) -> bool:
        return bool(
            self.speaker
            or self.low_confidence
            or self.bookmarked
            or self.tag_ids
            or self.not_tag_ids
            or self.no_tags
            or self.query.strip()
        )


def normalize_for_search(text: str) -> str:
    """NFC-normalize, lowercase and collapse whitespace."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", unicodedata.normalize("NFC", text).lower())


def create_search_regex(query: str, is_regex: bool) -> re.Pattern[str] | None:
    """Compile a case-insensitive search pattern.

    Returns None for an empty query, a match-everything pattern, or a
    regex that does not compile.
    """
    trimmed = query.strip()
    if not trimmed:
        return None

    unanchored = re.sub(r"\$$", "", re.sub(r"^\^", "", trimmed))
    if unanchored in MATCH_EVERYTHING_PATTERNS:
        return None

    source = trimmed if is_regex else re.escape(trimmed)
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as e:
        log_warning(f"Ignoring invalid search pattern {trimmed!r}: {e}")
        return None


def _words_text(segment: Segment) -> str:
    return " ".join(w.text for w in segment.words)


def _matches_query(
    segment: Segment,
    query_normalized: str,
    pattern: re.Pattern[str] | None,
    is_regex: bool,
) -> bool:
    if is_regex:
        if pattern is None:
            return True
        return bool(pattern.search(segment.text) or pattern.search(_words_text(segment)))

    if query_normalized in normalize_for_search(segment.text):
        return True
    return query_normalized in normalize_for_search(_words_text(segment))


def filter_segments(
    segments: Sequence[Segment],
    criteria: SegmentFilter,
    threshold: float | None = None,
) -> list[Segment]:
    """Return the segments matching ``criteria`` in transcript order.

    ``threshold`` is the low-confidence threshold in effect; with none,
    the low-confidence filter matches nothing.
    """
    pattern = create_search_regex(criteria.query, criteria.regex)
    query_normalized = normalize_for_search(criteria.query)
    # An unusable pattern disables search rather than hiding everything
    search = bool(query_normalized.strip()) and (pattern is not None or not criteria.regex)

    matched: list[Segment] = []
    for segment in segments:
        if criteria.speaker and segment.speaker != criteria.speaker:
            continue
        if criteria.low_confidence and not segment_has_low_confidence(segment, threshold):
            continue
        if criteria.bookmarked and not segment.bookmarked:
            continue

        tags = set(segment.tags)
        if criteria.no_tags and tags:
            continue
        if criteria.tag_ids and not tags.intersection(criteria.tag_ids):
            continue
        if criteria.not_tag_ids and tags.intersection(criteria.not_tag_ids):
            continue

        if search and not _matches_query(segment, query_normalized, pattern, criteria.regex):
            continue

        matched.append(segment)

    if criteria.is_active:
        log_step("Filter", f"{len(matched)} of {len(segments)} segments match")
    return matched


def filtered_segment_ids(
    segments: Sequence[Segment],
    criteria: SegmentFilter,
    threshold: float | None = None,
) -> list[str]:
    return [s.id for s in filter_segments(segments, criteria, threshold)]
