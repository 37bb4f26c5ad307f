"""Single-workout calculation commands."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Optional

import typer

from fitcalc.commands.common import emit_summaries, get_state, resolve_output_format, summarize
from fitcalc.core.config import resolve_label, resolve_len_step
from fitcalc.core.models import Running, Swimming, Walking
from fitcalc.utils.parsing import WorkoutInputError, parse_duration


def _duration(value: str) -> timedelta:
    try:
        return parse_duration(value)
    except WorkoutInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="--duration") from exc


def run_command(
    ctx: typer.Context,
    steps: int = typer.Option(..., help="Number of steps"),
    duration: str = typer.Option(..., help="Duration: HH:MM:SS, 30m, 1h15m or minutes"),
    weight: float = typer.Option(..., help="Body weight in kg"),
    len_step: Optional[float] = typer.Option(None, help="Step length in meters"),
    label: Optional[str] = typer.Option(None, help="Activity label in the report"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: text|table"),
    output_file: Optional[Path] = typer.Option(None, help="Also write JSON summary to file"),
) -> None:
    """Report distance, speed and calories for a run."""
    state = get_state(ctx)
    training = Running(
        label=label or resolve_label(state.config, "running"),
        action=steps,
        duration=_duration(duration),
        weight=weight,
        len_step=resolve_len_step(state.config, "running", explicit=len_step),
    )
    fmt = resolve_output_format(state, output_format)
    emit_summaries(state, summarize(state, [training]), output_format=fmt, output_file=output_file)


def walk_command(
    ctx: typer.Context,
    steps: int = typer.Option(..., help="Number of steps"),
    duration: str = typer.Option(..., help="Duration: HH:MM:SS, 3h45m or minutes"),
    weight: float = typer.Option(..., help="Body weight in kg"),
    height: float = typer.Option(..., help="Height in cm"),
    len_step: Optional[float] = typer.Option(None, help="Step length in meters"),
    label: Optional[str] = typer.Option(None, help="Activity label in the report"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: text|table"),
    output_file: Optional[Path] = typer.Option(None, help="Also write JSON summary to file"),
) -> None:
    """Report distance, speed and calories for a walk."""
    state = get_state(ctx)
    training = Walking(
        label=label or resolve_label(state.config, "walking"),
        action=steps,
        duration=_duration(duration),
        weight=weight,
        height=height,
        len_step=resolve_len_step(state.config, "walking", explicit=len_step),
    )
    fmt = resolve_output_format(state, output_format)
    emit_summaries(state, summarize(state, [training]), output_format=fmt, output_file=output_file)


def swim_command(
    ctx: typer.Context,
    strokes: int = typer.Option(..., help="Number of strokes"),
    duration: str = typer.Option(..., help="Duration: HH:MM:SS, 90m or minutes"),
    weight: float = typer.Option(..., help="Body weight in kg"),
    pool_length: float = typer.Option(..., help="Pool length in meters"),
    pool_count: int = typer.Option(..., help="Number of pool lengths completed"),
    len_step: Optional[float] = typer.Option(None, help="Stroke length in meters"),
    label: Optional[str] = typer.Option(None, help="Activity label in the report"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: text|table"),
    output_file: Optional[Path] = typer.Option(None, help="Also write JSON summary to file"),
) -> None:
    """Report distance, speed and calories for a pool swim."""
    state = get_state(ctx)
    training = Swimming(
        label=label or resolve_label(state.config, "swimming"),
        action=strokes,
        duration=_duration(duration),
        weight=weight,
        length_pool=pool_length,
        count_pool=pool_count,
        len_step=resolve_len_step(state.config, "swimming", explicit=len_step),
    )
    fmt = resolve_output_format(state, output_format)
    emit_summaries(state, summarize(state, [training]), output_format=fmt, output_file=output_file)
