"""Automatic low-confidence threshold via linear-time selection.

The threshold is the ``percentile`` order statistic of every word score in
the transcript, capped at ``max_threshold``. Quickselect finds it without
sorting the whole score list.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from transcope.models.transcript import Segment

DEFAULT_PERCENTILE = 0.1
DEFAULT_MAX_THRESHOLD = 0.4


def collect_confidence_scores(segments: Iterable[Segment]) -> list[float]:
    """Return every defined word score in encounter order.

    Words without a score are skipped, not counted as zero. The returned
    list is a fresh copy the caller owns.
    """
    return [
        word.confidence
        for segment in segments
        for word in segment.words
        if word.confidence is not None
    ]


def compute_auto_confidence_threshold(
    segments: Iterable[Segment],
    percentile: float = DEFAULT_PERCENTILE,
    max_threshold: float = DEFAULT_MAX_THRESHOLD,
) -> float | None:
    """Compute the low-confidence threshold for a transcript.

    Returns None when no word carries a score.
    """
    scores = collect_confidence_scores(segments)
    if not scores:
        return None

    count = len(scores)
    fraction = min(1.0, max(0.0, percentile))
    target_index = min(count - 1, max(0, math.floor(count * fraction)))
    selected = select_kth(scores, target_index)
    return min(max_threshold, selected)


def select_kth(values: list[float], target_index: int) -> float:
    """Return the value at ``target_index`` in ascending order.

    Reorders ``values`` in place. Uses a fixed midpoint pivot, so results
    are reproducible; worst case is quadratic on adversarial orderings.
    """
    left = 0
    right = len(values) - 1

    while left <= right:
        if left == right:
            return values[left]

        pivot_index = _partition(values, left, right, (left + right) // 2)

        if target_index == pivot_index:
            return values[pivot_index]

        if target_index < pivot_index:
            right = pivot_index - 1
        else:
            left = pivot_index + 1

    return values[target_index]


def _partition(values: list[float], left: int, right: int, pivot_index: int) -> int:
    """Lomuto partition of ``values[left:right + 1]``; returns the pivot's final slot."""
    pivot_value = values[pivot_index]
    values[pivot_index], values[right] = values[right], values[pivot_index]

    store_index = left
    for i in range(left, right):
        if values[i] < pivot_value:
            values[store_index], values[i] = values[i], values[store_index]
            store_index += 1

    values[right], values[store_index] = values[store_index], values[right]
    return store_index
