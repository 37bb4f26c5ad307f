"""Workout value types and their calorie formulas."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Protocol, Union

from fitcalc.core import calculations
from fitcalc.core.constants import (
    CALORIES_MEAN_SPEED_MULTIPLIER,
    CALORIES_MEAN_SPEED_SHIFT,
    CALORIES_SPEED_HEIGHT_MULTIPLIER,
    CALORIES_WEIGHT_MULTIPLIER,
    CM_IN_M,
    KMH_IN_MSEC,
    LEN_STEP,
    M_IN_KM,
    MIN_IN_HOURS,
    SWIMMING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_WEIGHT_MULTIPLIER,
    SWIMMING_LEN_STEP,
)


@dataclass(frozen=True)
class WorkoutSummary:
    """Derived statistics for a single workout."""

    label: str
    duration: timedelta
    distance: float
    speed: float
    calories: float = 0.0

    @property
    def minutes(self) -> float:
        return calculations.duration_minutes(self.duration)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "duration_minutes": self.minutes,
            "distance_km": round(self.distance, 2),
            "speed_kmh": round(self.speed, 2),
            "calories": round(self.calories, 2),
        }


class CaloriesCalculator(Protocol):
    """Anything that can report its calories and a base summary."""

    def calories(self) -> float:
        ...

    def training_info(self) -> WorkoutSummary:
        ...


def _base_info(label: str, duration: timedelta, distance_km: float, speed: float) -> WorkoutSummary:
    # Calories stay at the placeholder; read_data fills in the specialized figure.
    return WorkoutSummary(label=label, duration=duration, distance=distance_km, speed=speed)


@dataclass(frozen=True)
class Running:
    """Running session measured in strides."""

    label: str
    action: int
    duration: timedelta
    weight: float
    len_step: float = LEN_STEP

    def distance(self) -> float:
        return calculations.distance(self.action, self.len_step)

    def mean_speed(self) -> float:
        return calculations.mean_speed(self.distance(), self.duration)

    def calories(self) -> float:
        speed = self.mean_speed()
        return (
            (CALORIES_MEAN_SPEED_MULTIPLIER * speed + CALORIES_MEAN_SPEED_SHIFT)
            * self.weight
            / M_IN_KM
            * calculations.duration_hours(self.duration)
            * MIN_IN_HOURS
        )

    def training_info(self) -> WorkoutSummary:
        return _base_info(self.label, self.duration, self.distance(), self.mean_speed())


@dataclass(frozen=True)
class Walking:
    """Walking session measured in strides, with walker height in centimeters."""

    label: str
    action: int
    duration: timedelta
    weight: float
    height: float
    len_step: float = LEN_STEP

    def distance(self) -> float:
        return calculations.distance(self.action, self.len_step)

    def mean_speed(self) -> float:
        return calculations.mean_speed(self.distance(), self.duration)

    def calories(self) -> float:
        speed_ms = self.mean_speed() * KMH_IN_MSEC
        height_m = self.height / CM_IN_M
        return (
            CALORIES_WEIGHT_MULTIPLIER * self.weight
            + speed_ms**2 / height_m * CALORIES_SPEED_HEIGHT_MULTIPLIER * self.weight
        ) * calculations.duration_hours(self.duration) * MIN_IN_HOURS

    def training_info(self) -> WorkoutSummary:
        return _base_info(self.label, self.duration, self.distance(), self.mean_speed())


@dataclass(frozen=True)
class Swimming:
    """Pool swimming session.

    ``action`` counts strokes and ``len_step`` is the stroke length. Both only
    feed the distance figure; speed and calories come from the pool length
    and the number of lengths completed.
    """

    label: str
    action: int
    duration: timedelta
    weight: float
    length_pool: float
    count_pool: int
    len_step: float = SWIMMING_LEN_STEP

    def distance(self) -> float:
        return calculations.distance(self.action, self.len_step)

    def mean_speed(self) -> float:
        return calculations.pool_speed(self.length_pool, self.count_pool, self.duration)

    def calories(self) -> float:
        return (
            (self.mean_speed() + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
            * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
            * self.weight
            * calculations.duration_hours(self.duration)
        )

    def training_info(self) -> WorkoutSummary:
        return _base_info(self.label, self.duration, self.distance(), self.mean_speed())


Workout = Union[Running, Walking, Swimming]
