"""Sample transcript builders shared by the tests."""

from __future__ import annotations

from transcope.models.transcript import Segment, Word


def make_segment(
    segment_id: str,
    scores: list[float | None] | None = None,
    *,
    speaker: str = "SPEAKER_00",
    text: str = "segment",
    tags: list[str] | None = None,
    confirmed: bool = False,
    bookmarked: bool = False,
) -> Segment:
    scores = scores or []
    return Segment(
        id=segment_id,
        speaker=speaker,
        tags=tags or [],
        start=0.0,
        end=1.0,
        text=text,
        words=[
            Word(text=f"w{i}", start=float(i), end=i + 0.5, confidence=score)
            for i, score in enumerate(scores)
        ],
        confirmed=confirmed,
        bookmarked=bookmarked,
    )
