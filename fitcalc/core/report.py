"""Report composition for workout summaries."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from fitcalc.core.constants import REPORT_TEMPLATE
from fitcalc.core.models import CaloriesCalculator, WorkoutSummary
from fitcalc.utils.formatting import format_minutes


def message(summary: WorkoutSummary) -> str:
    """Render a summary into the fixed one-line report."""
    return REPORT_TEMPLATE.format(
        label=summary.label,
        minutes=format_minutes(summary.minutes),
        distance=summary.distance,
        speed=summary.speed,
        calories=summary.calories,
    )


def build_summary(training: CaloriesCalculator) -> WorkoutSummary:
    """Return the workout summary with its specialized calorie figure."""
    calories = training.calories()
    info = training.training_info()
    return replace(info, calories=calories)


def read_data(training: CaloriesCalculator) -> str:
    """Compute calories and summary for a workout and render the report line."""
    return message(build_summary(training))


def read_all(trainings: Iterable[CaloriesCalculator]) -> List[str]:
    return [read_data(training) for training in trainings]
