"""Tests for transcript import."""

import json
from pathlib import Path

import pytest

from transcope.ingestion.parse import (
    build_words_from_text,
    load_transcript,
    parse_transcript_data,
)


def test_whisper_format():
    data = [
        {"timestamp": [0.0, 2.0], "text": " hello there "},
        {"timestamp": [2.0, 3.0], "text": "bye"},
    ]
    transcript = parse_transcript_data(data, "ep1")
    assert transcript.id == "ep1"
    assert transcript.segment_ids == ["seg-0", "seg-1"]
    first = transcript.segments[0]
    assert first.speaker == "SPEAKER_00"
    assert first.tags == []
    assert first.text == "hello there"
    assert [w.text for w in first.words] == ["hello", "there"]
    assert first.words[1].start == pytest.approx(1.0)
    assert all(w.confidence is None for w in first.words)


def test_whisperx_format_defaults_and_scores():
    data = {
        "segments": [
            {
                "start": 0.0,
                "end": 1.0,
                "text": "Hi all",
                "words": [
                    {"word": "Hi", "start": 0.0, "end": 0.4, "score": 0.42},
                    {"word": "all", "start": 0.5, "end": 1.0, "score": "bad"},
                ],
            },
            {
                "id": "custom",
                "speaker": "SPEAKER_02",
                "start": 1.0,
                "end": 2.0,
                "text": "tagged",
                "tags": ["x", 7],
                "confirmed": True,
            },
        ]
    }
    transcript = parse_transcript_data(data)
    first, second = transcript.segments
    assert first.id == "seg-0"
    assert first.tags == []
    assert first.words[0].confidence == 0.42
    assert first.words[1].confidence is None
    assert second.id == "custom"
    assert second.speaker == "SPEAKER_02"
    assert second.tags == ["x", "7"]
    assert second.confirmed is True
    assert [w.text for w in second.words] == ["tagged"]


def test_numeric_ids_are_stringified():
    data = {"segments": [{"id": 3, "start": 0.0, "end": 1.0, "text": "x", "words": []}]}
    assert parse_transcript_data(data).segment_ids == ["3"]


def test_falsy_ids_fall_back_to_index():
    data = {"segments": [
        {"id": 0, "start": 0.0, "end": 1.0, "text": "x", "words": []},
        {"id": "", "start": 1.0, "end": 2.0, "text": "y", "words": []},
    ]}
    assert parse_transcript_data(data).segment_ids == ["seg-0", "seg-1"]


def test_unaligned_words_are_kept_without_score():
    """WhisperX leaves numerals unaligned: no start, end or score."""
    data = {"segments": [{
        "start": 0.0,
        "end": 2.0,
        "text": "in 2024 ok",
        "words": [
            {"word": "in", "start": 0.0, "end": 0.3, "score": 0.9},
            {"word": "2024"},
            {"word": "ok", "start": 1.5, "end": 2.0, "score": 0.2},
        ],
    }]}
    words = parse_transcript_data(data).segments[0].words
    assert [w.text for w in words] == ["in", "2024", "ok"]
    assert words[1].confidence is None
    assert words[1].start == pytest.approx(0.3)
    assert words[1].end == pytest.approx(0.3)
    assert words[2].confidence == 0.2


def test_unaligned_first_word_starts_at_segment():
    data = {"segments": [{"start": 4.0, "end": 5.0, "text": "42", "words": [{"word": "42"}]}]}
    word = parse_transcript_data(data).segments[0].words[0]
    assert (word.start, word.end) == (4.0, 4.0)


def test_word_without_text_is_rejected():
    data = {"segments": [{"start": 0.0, "end": 1.0, "text": "x", "words": [{"start": 0.0}]}]}
    with pytest.raises(ValueError, match="Segment 0"):
        parse_transcript_data(data)


def test_null_text_becomes_empty():
    data = {"segments": [{"start": 0.0, "end": 1.0, "text": None}]}
    segment = parse_transcript_data(data).segments[0]
    assert segment.text == ""
    assert segment.words == []

    whisper = parse_transcript_data([{"timestamp": [0.0, 1.0], "text": None}])
    assert whisper.segments[0].text == ""


def test_missing_segment_timing_is_rejected():
    data = {"segments": [
        {"start": 0.0, "end": 1.0, "text": "ok"},
        {"end": 2.0, "text": "no start"},
    ]}
    with pytest.raises(ValueError, match="Segment 1"):
        parse_transcript_data(data)


def test_missing_whisper_end_is_rejected():
    with pytest.raises(ValueError, match="Segment 0"):
        parse_transcript_data([{"timestamp": [0.0, None], "text": "x"}])


def test_unknown_format_returns_none():
    assert parse_transcript_data({"foo": 1}) is None
    assert parse_transcript_data([]) is None


def test_build_words_from_empty_text():
    assert build_words_from_text("   ", 0.0, 1.0) == []


def test_load_transcript(tmp_path: Path):
    path = tmp_path / "episode.json"
    path.write_text(json.dumps({"segments": [{"start": 0, "end": 1, "text": "a b"}]}), encoding="utf-8")
    transcript = load_transcript(path)
    assert transcript.id == "episode"
    assert len(transcript.segments) == 1


def test_load_transcript_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_transcript(tmp_path / "nope.json")


def test_load_transcript_bad_format(tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"nothing": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_transcript(path)
