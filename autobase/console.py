"""Shared rich console, status lines and logging setup."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

INDENT = "  "

STATUS_LABELS = {
    "info": "[cyan]INFO[/cyan]",
    "warning": "[yellow]WARNING[/yellow]",
    "error": "[bold red]ERROR[/bold red]",
    "success": "[green]SUCCESS[/green]",
}

_console: Optional[Console] = None


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console(stderr=True, highlight=False)
    return _console


def fmt_count(count: int) -> str:
    return f"[bold]{count}[/bold]"


def status(kind: str, message: str, *items: str, console: Optional[Console] = None) -> None:
    """Print a status line followed by indented detail items."""
    console = console or get_console()
    label = STATUS_LABELS.get(kind, STATUS_LABELS["info"])
    console.print(f"{label} {message}")
    for item in items:
        console.print(f"{INDENT}{item}")


def create_progress_bar(console: Optional[Console] = None) -> Progress:
    return Progress(
        TextColumn("{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console or get_console(),
        transient=True,
    )


def configure_logging(verbose: int = 0, quiet: bool = False) -> None:
    """Route library logging through rich: -q errors, default warnings, -v info, -vv debug."""
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=get_console(), show_path=False, markup=False)],
        force=True,
    )
