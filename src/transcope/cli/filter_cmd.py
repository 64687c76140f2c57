"""transcope filter: list segments matching filter criteria."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from transcope.cli.options import build_filter, config_option, filter_options, load_inputs
from transcope.confidence.highlight import resolve_confidence_threshold, segment_has_low_confidence
from transcope.scope.filters import filter_segments
from transcope.scope.segments import get_is_filtered

console = Console()


@click.command()
@click.argument("transcript", type=click.Path())
@filter_options
@config_option
def filter_cmd(transcript: str, config: str | None, **filters) -> None:
    """Show the segments a filter selects."""
    doc, settings = load_inputs(transcript, config)
    criteria = build_filter(**filters)
    threshold = resolve_confidence_threshold(doc.segments, config=settings.confidence)

    matched = filter_segments(doc.segments, criteria, threshold)

    table = Table(title=f"{doc.id}: {len(matched)}/{len(doc.segments)} segments")
    table.add_column("ID", style="bold")
    table.add_column("Speaker")
    table.add_column("Start", justify="right")
    table.add_column("Tags")
    table.add_column("Flags")
    table.add_column("Text")

    for segment in matched:
        flags = []
        if segment.confirmed:
            flags.append("[green]confirmed[/green]")
        if segment.bookmarked:
            flags.append("bookmarked")
        if segment_has_low_confidence(segment, threshold):
            flags.append("[yellow]low-conf[/yellow]")
        table.add_row(
            segment.id,
            segment.speaker,
            f"{segment.start:.2f}",
            ", ".join(segment.tags),
            " ".join(flags),
            segment.text[:60],
        )

    console.print(table)
    candidate_ids = [s.id for s in matched]
    if get_is_filtered(doc.segments, candidate_ids):
        console.print("[dim]Filter active[/dim]")
