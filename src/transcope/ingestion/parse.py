"""Parse Whisper and WhisperX JSON into normalized transcripts.

Every segment leaving this module carries a tag list (possibly empty) and
a word list. Word scores that are not numbers are dropped, never zeroed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from transcope.models.transcript import Segment, Transcript, Word
from transcope.utils.io import read_json
from transcope.utils.progress import log_step, log_warning

DEFAULT_SPEAKER = "SPEAKER_00"


def is_whisper_format(data: Any) -> bool:
    return (
        isinstance(data, list)
        and len(data) > 0
        and isinstance(data[0], dict)
        and "timestamp" in data[0]
    )


def is_whisperx_format(data: Any) -> bool:
    return isinstance(data, dict) and "segments" in data


def build_words_from_text(text: str, start: float, end: float) -> list[Word]:
    """Split text on whitespace and spread the words evenly over the span."""
    tokens = text.split()
    duration = end - start
    step = duration / len(tokens) if tokens else duration
    return [
        Word(text=token, start=start + i * step, end=start + (i + 1) * step)
        for i, token in enumerate(tokens)
    ]


def _score(value: Any) -> float | None:
    # bool is an int subclass but not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _text(entry: dict) -> str:
    return (entry.get("text") or "").strip()


def _segment_timing(start: Any, end: Any, index: int) -> tuple[float, float]:
    if start is None or end is None:
        raise ValueError(f"Segment {index} is missing start or end time")
    return start, end


def build_segments_from_whisper(data: list[dict]) -> list[Segment]:
    segments = []
    for index, entry in enumerate(data):
        timestamp = list(entry.get("timestamp") or []) + [None, None]
        start, end = _segment_timing(timestamp[0], timestamp[1], index)
        text = _text(entry)
        segments.append(Segment(
            id=f"seg-{index}",
            speaker=DEFAULT_SPEAKER,
            tags=[],
            start=start,
            end=end,
            text=text,
            words=build_words_from_text(text, start, end),
        ))
    return segments


def build_words_from_whisperx(raw_words: list[dict], start: float, index: int) -> list[Word]:
    """Convert WhisperX words; unaligned words have no timing or score.

    A word without a start is placed at the previous word's end (or the
    segment start); a word without an end gets zero length.
    """
    words = []
    cursor = start
    for entry in raw_words:
        if "word" not in entry:
            raise ValueError(f"Segment {index} has a word without text")
        word_start = entry.get("start")
        if word_start is None:
            word_start = cursor
        word_end = entry.get("end")
        if word_end is None:
            word_end = word_start
        words.append(Word(
            text=entry["word"],
            start=word_start,
            end=word_end,
            confidence=_score(entry.get("score")),
        ))
        cursor = word_end
    return words


def build_segments_from_whisperx(data: dict) -> list[Segment]:
    segments = []
    for index, entry in enumerate(data["segments"]):
        start, end = _segment_timing(entry.get("start"), entry.get("end"), index)
        text = _text(entry)

        raw_tags = entry.get("tags")
        tags = [t if isinstance(t, str) else str(t) for t in raw_tags] if isinstance(raw_tags, list) else []

        raw_words = entry.get("words")
        if raw_words is None:
            words = build_words_from_text(text, start, end)
        else:
            words = build_words_from_whisperx(raw_words, start, index)

        # 0 and "" fall back like a missing id
        raw_id = entry.get("id")
        segment_id = str(raw_id) if raw_id else f"seg-{index}"

        segments.append(Segment(
            id=segment_id,
            speaker=entry.get("speaker") or DEFAULT_SPEAKER,
            tags=tags,
            start=start,
            end=end,
            text=text,
            words=words,
            confirmed=bool(entry.get("confirmed", False)),
            bookmarked=bool(entry.get("bookmarked", False)),
        ))
    return segments


def parse_transcript_data(data: Any, transcript_id: str = "") -> Transcript | None:
    """Build a transcript from decoded JSON, or None if the format is unknown."""
    if is_whisper_format(data):
        segments = build_segments_from_whisper(data)
    elif is_whisperx_format(data):
        segments = build_segments_from_whisperx(data)
    else:
        return None
    return Transcript(id=transcript_id, segments=segments)


def load_transcript(path: Path | str) -> Transcript:
    """Read a transcript JSON file.

    Raises FileNotFoundError for a missing file and ValueError for an
    unrecognised format.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Transcript not found: {path}")

    transcript = parse_transcript_data(read_json(path), transcript_id=path.stem)
    if transcript is None:
        raise ValueError(f"Unrecognised transcript format: {path.name}")

    scored = sum(1 for s in transcript.segments if s.has_confidence)
    log_step(
        "Load",
        f"{path.name}: {len(transcript.segments)} segments, {scored} with word scores",
    )
    if transcript.segments and scored == 0:
        log_warning("No word confidence scores, auto threshold unavailable")
    return transcript
