"""Segment index and scope helpers.

All functions are pure: they never mutate segments and never reorder the
requested ids. The index is a snapshot and must be rebuilt by the caller
whenever the segment list changes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from transcope.models.transcript import Segment

SegmentIndex = Mapping[str, Segment]


@dataclass
class ScopedSegments:
    """Everything a bulk AI action needs to know about its scope."""

    segment_by_id: dict[str, Segment]
    scoped_segment_ids: list[str]
    is_filtered: bool


def build_segment_index(segments: Iterable[Segment]) -> dict[str, Segment]:
    """Map segment id to segment. A repeated id keeps the later segment."""
    return {segment.id: segment for segment in segments}


def get_scoped_segment_ids(
    index: SegmentIndex,
    requested_ids: Iterable[str],
    exclude_confirmed: bool,
) -> list[str]:
    """Return the requested ids that still exist and are eligible.

    Missing ids are dropped, as are confirmed segments when
    ``exclude_confirmed`` is set. Order and duplicates follow
    ``requested_ids``.
    """
    scoped: list[str] = []
    for segment_id in requested_ids:
        segment = index.get(segment_id)
        if segment is None:
            continue
        if exclude_confirmed and segment.confirmed:
            continue
        scoped.append(segment_id)
    return scoped


def get_is_filtered(all_segments: Sequence[Segment], candidate_ids: Sequence[str]) -> bool:
    """Whether some filter looks active.

    Compares lengths only: a same-size candidate list with different
    members reads as unfiltered.
    """
    return len(candidate_ids) != len(all_segments)


def resolve_scope(
    segments: Sequence[Segment],
    filtered_ids: Sequence[str],
    exclude_confirmed: bool,
) -> ScopedSegments:
    segment_by_id = build_segment_index(segments)
    return ScopedSegments(
        segment_by_id=segment_by_id,
        scoped_segment_ids=get_scoped_segment_ids(segment_by_id, filtered_ids, exclude_confirmed),
        is_filtered=get_is_filtered(segments, filtered_ids),
    )
