"""Shared command helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.table import Table

from fitcalc.core.models import Workout, WorkoutSummary
from fitcalc.core.report import build_summary, message
from fitcalc.core.state import CLIState
from fitcalc.exporters.json_export import summaries_payload, write_json
from fitcalc.utils.formatting import summary_row
from fitcalc.utils.parsing import WorkoutInputError, check_ranges

OUTPUT_FORMATS = {"text", "table"}


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def resolve_output_format(state: CLIState, explicit: Optional[str]) -> str:
    """Output format with CLI flag first, then config."""
    output_format = explicit or str(state.config.get("defaults", {}).get("output_format", "text"))
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter("--format must be one of: text, table")
    return output_format


def summarize(state: CLIState, trainings: List[Workout]) -> List[WorkoutSummary]:
    """Range-check workouts and compute their summaries."""
    summaries: List[WorkoutSummary] = []
    for index, training in enumerate(trainings, 1):
        try:
            check_ranges(training)
        except WorkoutInputError as exc:
            raise typer.BadParameter(f"Workout #{index}: {exc}") from exc
        summary = build_summary(training)
        state.debug(
            f"{type(training).__name__} #{index}: distance={summary.distance:.4f} km "
            f"speed={summary.speed:.4f} km/h calories={summary.calories:.4f}"
        )
        summaries.append(summary)
    return summaries


def emit_summaries(
    state: CLIState,
    summaries: List[WorkoutSummary],
    output_format: str = "text",
    output_file: Optional[Path] = None,
) -> None:
    """Print summaries in the selected output mode."""
    payload = summaries_payload(summaries)
    if output_file:
        write_json(output_file, payload)
        state.debug(f"Wrote {len(summaries)} summaries to {output_file}")

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("activity\tminutes\tdistance_km\tspeed_kmh\tcalories")
        for summary in summaries:
            typer.echo("\t".join(summary_row(summary)))
        return

    if output_format == "table":
        table = Table(title=f"Workouts ({len(summaries)} total)")
        table.add_column("Activity")
        table.add_column("Duration (min)", justify="right")
        table.add_column("Distance (km)", justify="right")
        table.add_column("Avg speed (km/h)", justify="right")
        table.add_column("Calories", justify="right")
        for summary in summaries:
            table.add_row(*summary_row(summary))
        state.console.print(table)
        return

    if state.quiet:
        return
    for summary in summaries:
        typer.echo(message(summary))
