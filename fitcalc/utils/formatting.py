"""Formatting helpers used by reports and console output."""

from __future__ import annotations

from typing import List

from fitcalc.core.models import WorkoutSummary


def format_minutes(minutes: float) -> str:
    """Render minutes without a trailing ``.0`` for whole values."""
    if float(minutes).is_integer():
        return str(int(minutes))
    return repr(float(minutes))


def format_fixed(value: float) -> str:
    """Fixed-point with two decimals."""
    return f"{value:.2f}"


def summary_row(summary: WorkoutSummary) -> List[str]:
    """Table/TSV cells for one summary."""
    return [
        summary.label,
        format_minutes(summary.minutes),
        format_fixed(summary.distance),
        format_fixed(summary.speed),
        format_fixed(summary.calories),
    ]
