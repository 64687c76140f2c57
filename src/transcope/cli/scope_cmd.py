"""transcope scope: resolve the segments a bulk AI action would touch."""

from __future__ import annotations

import json

import click

from transcope.cli.options import build_filter, config_option, filter_options, load_inputs
from transcope.confidence.highlight import resolve_confidence_threshold
from transcope.scope.filters import filtered_segment_ids
from transcope.scope.segments import resolve_scope
from transcope.utils.io import write_json
from transcope.utils.progress import log_step, log_success, log_warning


@click.command()
@click.argument("transcript", type=click.Path())
@click.option(
    "--id", "segment_ids",
    multiple=True,
    help="Explicit segment ids to scope (overrides filter options)",
)
@click.option(
    "--exclude-confirmed/--include-confirmed",
    default=None,
    help="Skip segments already confirmed (default from config: exclude)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the scoped ids as JSON")
@click.option(
    "--output", "-o",
    default=None,
    type=click.Path(),
    help="Write the scope result to a JSON file",
)
@filter_options
@config_option
def scope_cmd(
    transcript: str,
    segment_ids: tuple[str, ...],
    exclude_confirmed: bool | None,
    as_json: bool,
    output: str | None,
    config: str | None,
    **filters,
) -> None:
    """Scope an AI action to filtered or explicitly selected segments."""
    doc, settings = load_inputs(transcript, config)
    if exclude_confirmed is None:
        exclude_confirmed = settings.scope.exclude_confirmed

    if segment_ids:
        candidate_ids = list(segment_ids)
    else:
        criteria = build_filter(**filters)
        threshold = resolve_confidence_threshold(doc.segments, config=settings.confidence)
        candidate_ids = filtered_segment_ids(doc.segments, criteria, threshold)

    scope = resolve_scope(doc.segments, candidate_ids, exclude_confirmed)
    dropped = len(candidate_ids) - len(scope.scoped_segment_ids)
    log_step(
        "Scope",
        f"{len(scope.scoped_segment_ids)} segment(s) in scope"
        + (f", {dropped} skipped (missing or confirmed)" if dropped else ""),
    )
    if not scope.scoped_segment_ids:
        log_warning("Nothing to act on")

    if output:
        write_json(output, {
            "transcript": doc.id,
            "exclude_confirmed": exclude_confirmed,
            "is_filtered": scope.is_filtered,
            "segment_ids": scope.scoped_segment_ids,
        })
        log_success(f"Wrote scope to {output}")

    if as_json:
        click.echo(json.dumps(scope.scoped_segment_ids))
    else:
        for segment_id in scope.scoped_segment_ids:
            click.echo(segment_id)
