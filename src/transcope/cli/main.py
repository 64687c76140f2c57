"""Root CLI group for Transcope."""

from __future__ import annotations

import click

from transcope import __version__


@click.group()
@click.version_option(version=__version__, prog_name="transcope")
def cli() -> None:
    """Transcope: low-confidence detection and segment scoping for transcripts."""


# Import and register subcommands
from transcope.cli.threshold_cmd import threshold_cmd  # noqa: E402
from transcope.cli.filter_cmd import filter_cmd  # noqa: E402
from transcope.cli.scope_cmd import scope_cmd  # noqa: E402

cli.add_command(threshold_cmd, "threshold")
cli.add_command(filter_cmd, "filter")
cli.add_command(scope_cmd, "scope")
