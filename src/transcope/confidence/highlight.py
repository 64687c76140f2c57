"""Low-confidence word flagging against a manual or automatic threshold."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from transcope.confidence.threshold import compute_auto_confidence_threshold
from transcope.models.config import ConfidenceConfig
from transcope.models.transcript import Segment, Word


def resolve_confidence_threshold(
    segments: Sequence[Segment],
    manual_threshold: float | None = None,
    config: ConfidenceConfig | None = None,
) -> float | None:
    """Return the threshold in effect: manual when set, else automatic."""
    if manual_threshold is not None:
        return manual_threshold

    config = config or ConfidenceConfig()
    if config.manual_threshold is not None:
        return config.manual_threshold
    return compute_auto_confidence_threshold(
        segments,
        percentile=config.percentile,
        max_threshold=config.max_threshold,
    )


def is_low_confidence(word: Word, threshold: float | None) -> bool:
    if threshold is None or word.confidence is None:
        return False
    return word.confidence <= threshold


def segment_has_low_confidence(segment: Segment, threshold: float | None) -> bool:
    return any(is_low_confidence(w, threshold) for w in segment.words)


def find_low_confidence_words(
    segments: Iterable[Segment],
    threshold: float | None,
) -> list[tuple[str, int, Word]]:
    """List flagged words as ``(segment_id, word_index, word)`` in transcript order."""
    flagged: list[tuple[str, int, Word]] = []
    if threshold is None:
        return flagged

    for segment in segments:
        for index, word in enumerate(segment.words):
            if is_low_confidence(word, threshold):
                flagged.append((segment.id, index, word))
    return flagged
