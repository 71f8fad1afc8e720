"""Argument validation and console reporting."""

import argparse
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from . import application
from . import base_table
from . import console as cs
from . import planning

console = cs.get_console()

MinMaxPlan = planning.MinMaxPlan
RunOutcome = application.RunOutcome


def validate_args(args: argparse.Namespace) -> None:
    """Reject impossible option values; warn about surprising ones."""
    if args.words <= 0:
        raise SystemExit(f"--words must be positive (got {args.words})")
    if args.jobs <= 0:
        raise SystemExit(f"--jobs must be positive (got {args.jobs})")
    if args.descender is not None and args.descender > 0:
        cs.status(
            "warning",
            f"--descender {args.descender} is positive; using {-args.descender}",
        )
    if args.words < 50:
        cs.status(
            "warning",
            f"--words {args.words} is low; rare ascenders and descenders may be missed",
        )


def _word_note(word: Optional[str]) -> str:
    return f" [dim]({word})[/dim]" if word else ""


def report_plan(plan: MinMaxPlan, verbose: int = 0) -> None:
    """Print emitted records, and with -v every computed record."""
    table = Table(title="BASE MinMax records", show_lines=False)
    table.add_column("Key")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Status")

    rows = list(plan.script_defaults) + list(plan.language_records)
    rows.sort(key=lambda r: r.key)
    for record in rows:
        if not record.emitted and verbose < 1:
            continue
        extent = record.extent
        overridden = getattr(record, "overridden", ())
        note = "emitted" if record.emitted else "[dim]within tolerance[/dim]"
        if overridden:
            note += f" [cyan](override: {', '.join(overridden)})[/cyan]"
        table.add_row(
            str(record.key),
            f"{extent.min}{_word_note(extent.min_word) if verbose else ''}",
            f"{extent.max}{_word_note(extent.max_word) if verbose else ''}",
            note,
        )
    console.print(table)
    report_issues(plan.issues)


def report_issues(issues: Iterable[Exception]) -> None:
    for issue in issues:
        cs.status("warning", str(issue))


def _coord_text(value: Optional[int]) -> str:
    return "NULL" if value is None else str(value)


def report_entries(
    axis_name: str,
    entries: Iterable[base_table.BaseScriptEntry],
    out: Optional[Console] = None,
) -> None:
    """Print one axis of BASE script entries, the way autobase-dump shows them."""
    out = out or console
    entries = list(entries)
    if not entries:
        return
    out.print(f"[bold]{axis_name} axis[/bold]")
    for entry in entries:
        out.print(f"{cs.INDENT}Script [bold]{entry.script_tag}[/bold]")
        if entry.baselines:
            values = " ".join(
                f"{tag}={value}" for tag, value in sorted(entry.baselines.items())
            )
            out.print(
                f"{cs.INDENT * 2}Baselines (default {entry.default_baseline}): {values}"
            )
        if entry.default_minmax is not None:
            low, high = entry.default_minmax
            out.print(
                f"{cs.INDENT * 2}Default  Min: {_coord_text(low)} Max: {_coord_text(high)}"
            )
        for lang_tag in sorted(entry.languages):
            low, high = entry.languages[lang_tag]
            out.print(
                f"{cs.INDENT * 2}Language {lang_tag.strip()}  "
                f"Min: {_coord_text(low)} Max: {_coord_text(high)}"
            )


def report_outcome(outcome: RunOutcome, verbose: int = 0) -> None:
    if outcome.plan is not None:
        report_plan(outcome.plan, verbose)
        if not len(outcome.plan.result):
            cs.status(
                "info", "Every script and language is within tolerance of its reference"
            )
    else:
        cs.status(
            "info",
            f"Fixed CJK layout for {cs.fmt_count(len(outcome.horizontal))} script(s)",
        )
        if verbose:
            report_entries("Horizontal", outcome.horizontal)
            report_entries("Vertical", outcome.vertical)
