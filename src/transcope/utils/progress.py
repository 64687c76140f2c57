"""Console reporting utilities using Rich."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console(stderr=True)


def _log(prefix: str, message: str) -> None:
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(f"[dim]\\[{ts}][/dim] {prefix} {message}", highlight=False)


def log_step(step: str, message: str) -> None:
    """Log a processing step."""
    _log(f"[bold cyan]{step}[/bold cyan]", message)


def log_success(message: str) -> None:
    """Log a success message."""
    _log("[green]✓[/green]", message)


def log_warning(message: str) -> None:
    """Log a warning message."""
    _log("[yellow]⚠[/yellow]", message)


def log_error(message: str) -> None:
    """Log an error message."""
    _log("[red]✗[/red]", message)


def show_summary(title: str, details: dict) -> None:
    """Show a key/value summary panel."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()

    for key, value in details.items():
        table.add_row(key, "—" if value is None else str(value))

    console.print(Panel(table, title=f"[bold]{title}[/bold]", border_style="green"))
