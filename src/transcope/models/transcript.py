"""Transcript data models."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Word(BaseModel):
    """A single transcribed word with timing and optional ASR confidence."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(validation_alias=AliasChoices("text", "word"))
    start: float
    end: float
    # None means no score was reported; never treated as 0.0
    confidence: float | None = Field(
        default=None, validation_alias=AliasChoices("confidence", "score")
    )


class Segment(BaseModel):
    """A transcript segment (contiguous speech by one speaker)."""

    model_config = ConfigDict(frozen=True)

    id: str
    speaker: str
    tags: list[str] = Field(default_factory=list)
    start: float
    end: float
    text: str
    words: list[Word] = Field(default_factory=list)
    confirmed: bool = False
    bookmarked: bool = False

    @property
    def has_confidence(self) -> bool:
        return any(w.confidence is not None for w in self.words)


class Transcript(BaseModel):
    """An ordered sequence of segments owned by one transcript."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    segments: list[Segment] = Field(default_factory=list)

    @property
    def segment_ids(self) -> list[str]:
        return [s.id for s in self.segments]
