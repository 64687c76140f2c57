"""Options and loaders shared by the subcommands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click
from pydantic import ValidationError

from transcope.ingestion.parse import load_transcript
from transcope.models.config import Settings, load_settings
from transcope.models.transcript import Transcript
from transcope.scope.filters import SegmentFilter
from transcope.utils.progress import log_error


def config_option(func: Callable) -> Callable:
    return click.option(
        "--config", "-c",
        default=None,
        type=click.Path(),
        help="Path to transcope.yaml (defaults to ./transcope.yaml if present)",
    )(func)


def filter_options(func: Callable) -> Callable:
    """Attach the segment filter options to a command."""
    options = [
        click.option("--speaker", default=None, help="Only segments by this speaker"),
        click.option(
            "--low-confidence", is_flag=True,
            help="Only segments with a word at or below the confidence threshold",
        ),
        click.option("--bookmarked", is_flag=True, help="Only bookmarked segments"),
        click.option("--tag", "tag_ids", multiple=True, help="Segments with any of these tags"),
        click.option("--not-tag", "not_tag_ids", multiple=True, help="Segments without these tags"),
        click.option("--no-tags", is_flag=True, help="Only untagged segments"),
        click.option("--search", "query", default="", help="Text to search for"),
        click.option("--regex", is_flag=True, help="Treat --search as a regular expression"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_filter(
    speaker: str | None,
    low_confidence: bool,
    bookmarked: bool,
    tag_ids: tuple[str, ...],
    not_tag_ids: tuple[str, ...],
    no_tags: bool,
    query: str,
    regex: bool,
) -> SegmentFilter:
    return SegmentFilter(
        speaker=speaker,
        low_confidence=low_confidence,
        bookmarked=bookmarked,
        tag_ids=list(tag_ids),
        not_tag_ids=list(not_tag_ids),
        no_tags=no_tags,
        query=query,
        regex=regex,
    )


def load_inputs(transcript_path: str, config_path: str | None) -> tuple[Transcript, Settings]:
    """Load settings and transcript, exiting with status 1 on failure."""
    try:
        settings = load_settings(config_path)
        transcript = load_transcript(Path(transcript_path).resolve())
    except (FileNotFoundError, ValueError, ValidationError) as e:
        log_error(str(e))
        raise SystemExit(1)
    return transcript, settings
