"""Batch report and demo commands."""

from __future__ import annotations

import json
import sys
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml

from fitcalc.commands.common import emit_summaries, get_state, resolve_output_format, summarize
from fitcalc.core.config import resolve_label, resolve_len_step
from fitcalc.core.models import Running, Swimming, Walking, Workout
from fitcalc.utils.parsing import WorkoutInputError, build_workout, load_workout_input


def demo_workouts(config: Dict[str, Any]) -> List[Workout]:
    """Reference swimming, walking and running sessions."""
    return [
        Swimming(
            label=resolve_label(config, "swimming"),
            action=2000,
            duration=timedelta(minutes=90),
            weight=85,
            length_pool=50,
            count_pool=5,
            len_step=resolve_len_step(config, "swimming"),
        ),
        Walking(
            label=resolve_label(config, "walking"),
            action=20000,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
            height=185,
            len_step=resolve_len_step(config, "walking"),
        ),
        Running(
            label=resolve_label(config, "running"),
            action=5000,
            duration=timedelta(minutes=30),
            weight=85,
            len_step=resolve_len_step(config, "running"),
        ),
    ]


def report_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(None, help="JSON/YAML file with workout(s)"),
    stdin: bool = typer.Option(False, "--stdin", help="Read workout data from stdin"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: text|table"),
    output_file: Optional[Path] = typer.Option(None, help="Also write JSON summaries to file"),
) -> None:
    """Report every workout listed in a JSON/YAML file."""
    state = get_state(ctx)

    if file is not None and not file.exists():
        raise typer.BadParameter(f"File not found: {file}", param_hint="FILE")

    stdin_text = sys.stdin.read() if stdin else ""
    try:
        records = load_workout_input(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    except WorkoutInputError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Could not parse workout input: {exc}") from exc

    if not records:
        raise typer.BadParameter("Provide a workout FILE or --stdin with at least one workout")

    trainings: List[Workout] = []
    for index, record in enumerate(records, 1):
        try:
            trainings.append(build_workout(record, state.config))
        except WorkoutInputError as exc:
            raise typer.BadParameter(f"Workout #{index}: {exc}") from exc
    state.debug(f"Loaded {len(trainings)} workout(s)")

    fmt = resolve_output_format(state, output_format)
    emit_summaries(state, summarize(state, trainings), output_format=fmt, output_file=output_file)


def demo_command(
    ctx: typer.Context,
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: text|table"),
) -> None:
    """Print reports for the reference swimming, walking and running sessions."""
    state = get_state(ctx)
    fmt = resolve_output_format(state, output_format)
    emit_summaries(state, summarize(state, demo_workouts(state.config)), output_format=fmt)
