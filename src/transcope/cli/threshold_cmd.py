"""transcope threshold: report the low-confidence threshold."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from transcope.cli.options import config_option, load_inputs
from transcope.confidence.highlight import find_low_confidence_words, resolve_confidence_threshold
from transcope.confidence.threshold import collect_confidence_scores, compute_auto_confidence_threshold
from transcope.utils.progress import log_warning, show_summary

console = Console()


@click.command()
@click.argument("transcript", type=click.Path())
@click.option(
    "--percentile",
    default=None,
    type=click.FloatRange(0.0, 1.0),
    help="Score percentile used for the auto threshold (default 0.1)",
)
@click.option(
    "--max-threshold",
    default=None,
    type=click.FloatRange(0.0, 1.0),
    help="Upper cap on the auto threshold (default 0.4)",
)
@click.option(
    "--manual",
    default=None,
    type=click.FloatRange(0.0, 1.0),
    help="Manual threshold overriding the auto value",
)
@click.option("--show-words", is_flag=True, help="List every flagged word")
@config_option
def threshold_cmd(
    transcript: str,
    percentile: float | None,
    max_threshold: float | None,
    manual: float | None,
    show_words: bool,
    config: str | None,
) -> None:
    """Compute the low-confidence threshold for a transcript."""
    doc, settings = load_inputs(transcript, config)
    confidence = settings.confidence.model_copy(update={
        k: v for k, v in {"percentile": percentile, "max_threshold": max_threshold}.items()
        if v is not None
    })

    segments = doc.segments
    auto = compute_auto_confidence_threshold(
        segments,
        percentile=confidence.percentile,
        max_threshold=confidence.max_threshold,
    )
    effective = resolve_confidence_threshold(segments, manual, confidence)
    flagged = find_low_confidence_words(segments, effective)

    if effective is None:
        log_warning("No confidence scores available, low-confidence detection disabled")

    show_summary("Confidence Threshold", {
        "Transcript": doc.id,
        "Scored words": len(collect_confidence_scores(segments)),
        "Percentile": confidence.percentile,
        "Cap": confidence.max_threshold,
        "Auto threshold": None if auto is None else f"{auto:.3f}",
        "Effective threshold": None if effective is None else f"{effective:.3f}",
        "Low-confidence words": len(flagged),
    })

    if show_words and flagged:
        table = Table(title="Low-confidence words")
        table.add_column("Segment", style="bold")
        table.add_column("#", justify="right")
        table.add_column("Word")
        table.add_column("Score", justify="right")
        table.add_column("Time", justify="right")
        for segment_id, index, word in flagged:
            table.add_row(
                segment_id,
                str(index),
                word.text,
                f"{word.confidence:.3f}",
                f"{word.start:.2f}s",
            )
        console.print(table)
