# src/rvedit/cli.py
"""
rvedit Command Line Interface (CLI).

Developer tooling for the history engine, built with `typer` and `rich`.
It replays recorded edit scripts outside the editor so undo/redo behavior
(eviction, redo invalidation) can be inspected step by step.

Usage
-----
    # Replay an edit script and show every step
    $ rvedit replay scripts/example_script.json

    # Force a different undo depth than the script declares
    $ rvedit replay scripts/example_script.json --capacity 2

    # Print the JSON schema edit scripts must follow
    $ rvedit schema
"""

from __future__ import annotations

import json
import traceback
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rvedit.core.contracts.script import HistoryScript
from rvedit.core.contracts.status import HistoryStatus
from rvedit.core.replay import ReplayReport, load_script, replay

# Make RVEDIT_HISTORY_CAPACITY / LOG_LEVEL from .env visible to the engine
load_dotenv()

app = typer.Typer(
    help="rvedit: inspect the undo/redo history engine of the script editor.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _fmt(value: Any) -> str:
    """Render a snapshot as compact JSON; ``None`` shows as a dim dash."""
    if value is None:
        return "[dim]-[/dim]"
    return escape(json.dumps(value, ensure_ascii=False, default=str))


def _render_steps(report: ReplayReport) -> None:
    table = Table(title="History replay", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("op", style="cyan")
    table.add_column("returned")
    table.add_column("present", style="bold")
    table.add_column("undo", justify="right")
    table.add_column("redo", justify="right")

    for step in report.steps:
        label = step.op.op
        note = getattr(step.op, "note", None)
        if note:
            label = f"{label} ({escape(note)})"
        table.add_row(
            str(step.index),
            label,
            _fmt(step.returned),
            _fmt(step.present),
            str(step.status.undo_count),
            str(step.status.redo_count),
        )
    console.print(table)


def _render_status(status: HistoryStatus, present: Any) -> None:
    undo = "[green]enabled[/green]" if status.can_undo else "[dim]disabled[/dim]"
    redo = "[green]enabled[/green]" if status.can_redo else "[dim]disabled[/dim]"
    console.print(
        Panel(
            f"Present: {_fmt(present)}\n"
            f"Undo: {undo} ({status.undo_count}/{status.capacity})\n"
            f"Redo: {redo} ({status.redo_count})",
            title="Final state",
            border_style="green",
        )
    )


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command("replay")  # type: ignore[misc]
def replay_command(
    script_file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a JSON edit script.",
        ),
    ],
    capacity: Annotated[
        int | None,
        typer.Option(
            "--capacity",
            "-c",
            min=1,
            help="Override the undo depth declared by the script.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Replay an edit script against a fresh history manager.

    Every operation is applied in order; the table shows what undo/redo
    returned and the counters after each step.
    """
    loaded = load_script(script_file)
    if loaded.is_err():
        console.print(f"[bold red]❌ Script Error:[/bold red] {escape(loaded.unwrap_err())}")
        raise typer.Exit(code=1)

    try:
        report = replay(loaded.unwrap(), capacity=capacity)
    except Exception as e:
        console.print(f"[bold red]❌ Replay Error:[/bold red] {escape(str(e))}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e

    _render_steps(report)
    _render_status(report.final_status, report.manager.get_present())


@app.command()  # type: ignore[misc]
def schema() -> None:
    """Print the JSON schema of edit scripts."""
    # Plain echo: the output is meant to be piped into files and validators.
    typer.echo(json.dumps(HistoryScript.model_json_schema(), indent=2))


if __name__ == "__main__":
    app()
