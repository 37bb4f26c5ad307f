"""Shared distance and speed formulas."""

from __future__ import annotations

from datetime import timedelta

from fitcalc.core.constants import M_IN_KM


def duration_hours(duration: timedelta) -> float:
    """Return a duration as fractional hours."""
    return duration.total_seconds() / 3600


def duration_minutes(duration: timedelta) -> float:
    """Return a duration as fractional minutes."""
    return duration.total_seconds() / 60


def distance(action: int, len_step: float) -> float:
    """Distance in km covered by ``action`` units of ``len_step`` meters."""
    return action * len_step / M_IN_KM


def mean_speed(distance_km: float, duration: timedelta) -> float:
    """Average speed in km/h.

    ``duration`` must be positive; a zero duration raises ``ZeroDivisionError``.
    """
    return distance_km / duration_hours(duration)


def pool_speed(length_pool: float, count_pool: int, duration: timedelta) -> float:
    """Average swimming speed in km/h from pool length and lengths completed."""
    return length_pool * count_pool / M_IN_KM / duration_hours(duration)
