"""Parsing helpers for workout input conversion."""

from __future__ import annotations

import json
import math
import re
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from fitcalc.core.config import resolve_label, resolve_len_step
from fitcalc.core.constants import TYPE_ALIASES
from fitcalc.core.models import Running, Swimming, Walking, Workout

_UNIT_DURATION = re.compile(
    r"^(?:(?P<h>\d+(?:\.\d+)?)h)?"
    r"(?:(?P<m>\d+(?:\.\d+)?)m(?:in)?)?"
    r"(?:(?P<s>\d+(?:\.\d+)?)s)?$"
)


class WorkoutInputError(ValueError):
    """Raised when a workout record cannot be turned into a workout."""


def parse_duration(value: Union[str, int, float]) -> timedelta:
    """Parse duration into a timedelta.

    Accepts ``HH:MM:SS``, ``MM:SS``, unit strings such as ``3h45m`` or
    ``90min``, and bare numbers, which are minutes.
    """
    if isinstance(value, bool):
        raise WorkoutInputError(f"Invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return _timedelta(value, minutes=value)

    raw = str(value).strip().lower().replace(" ", "")
    if not raw:
        raise WorkoutInputError("Duration is empty")

    if ":" in raw:
        parts = raw.split(":")
        try:
            numbers = [int(part) for part in parts]
        except ValueError as exc:
            raise WorkoutInputError(f"Invalid duration: {value!r}") from exc
        if len(numbers) == 2:
            return _timedelta(value, minutes=numbers[0], seconds=numbers[1])
        if len(numbers) == 3:
            return _timedelta(value, hours=numbers[0], minutes=numbers[1], seconds=numbers[2])
        raise WorkoutInputError(f"Invalid duration: {value!r}")

    try:
        minutes = float(raw)
    except ValueError:
        minutes = None
    if minutes is not None:
        return _timedelta(value, minutes=minutes)

    match = _UNIT_DURATION.match(raw)
    if not match or not any(match.groupdict().values()):
        raise WorkoutInputError(f"Invalid duration: {value!r}")
    return _timedelta(
        value,
        hours=float(match.group("h") or 0),
        minutes=float(match.group("m") or 0),
        seconds=float(match.group("s") or 0),
    )


def _timedelta(source: Any, **parts: float) -> timedelta:
    # NaN raises ValueError, huge values raise OverflowError.
    try:
        return timedelta(**parts)
    except (ValueError, OverflowError) as exc:
        raise WorkoutInputError(f"Invalid duration: {source!r}") from exc


def load_workout_input(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> List[Dict[str, Any]]:
    """Load workout object(s) from file or stdin text."""
    raw_data: Any
    if file_path:
        text = file_path.read_text()
        if file_path.suffix.lower() in {".yaml", ".yml"}:
            raw_data = yaml.safe_load(text)
        else:
            raw_data = json.loads(text)
    elif read_stdin:
        text = stdin_text.strip()
        if not text:
            return []
        try:
            raw_data = json.loads(text)
        except json.JSONDecodeError:
            raw_data = yaml.safe_load(text)
    else:
        return []

    if isinstance(raw_data, dict):
        if isinstance(raw_data.get("workouts"), list):
            raw_data = raw_data["workouts"]
        else:
            return [raw_data]
    if not isinstance(raw_data, list):
        return []
    for index, item in enumerate(raw_data, 1):
        if not isinstance(item, dict):
            raise WorkoutInputError(f"Workout #{index}: expected an object, got {item!r}")
    return raw_data


def _field(record: Dict[str, Any], *names: str) -> Any:
    for name in names:
        if record.get(name) is not None:
            return record[name]
    raise WorkoutInputError(f"Missing field '{names[0]}'")


def _number(record: Dict[str, Any], *names: str) -> float:
    value = _field(record, *names)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise WorkoutInputError(f"Field '{names[0]}' must be a number, got {value!r}") from exc


def _count(record: Dict[str, Any], *names: str) -> int:
    value = _number(record, *names)
    if not value.is_integer():
        raise WorkoutInputError(f"Field '{names[0]}' must be a whole number, got {value!r}")
    return int(value)


def workout_kind(value: Any) -> str:
    """Normalize a workout type name to running|walking|swimming."""
    kind = TYPE_ALIASES.get(str(value or "").strip().lower())
    if kind is None:
        raise WorkoutInputError(f"Unsupported workout type: {value!r}")
    return kind


def build_workout(record: Dict[str, Any], config: Optional[Dict[str, Any]] = None) -> Workout:
    """Build a workout value from an input record."""
    cfg = config or {}
    kind = workout_kind(record.get("type"))

    label = str(record.get("label") or resolve_label(cfg, kind))
    explicit_step = _number(record, "len_step") if record.get("len_step") is not None else None
    len_step = resolve_len_step(cfg, kind, explicit=explicit_step)
    action = _count(record, "action", "steps", "strokes")
    duration = parse_duration(_field(record, "duration"))
    weight = _number(record, "weight")

    if kind == "running":
        return Running(label=label, action=action, duration=duration, weight=weight, len_step=len_step)
    if kind == "walking":
        return Walking(
            label=label,
            action=action,
            duration=duration,
            weight=weight,
            height=_number(record, "height"),
            len_step=len_step,
        )
    return Swimming(
        label=label,
        action=action,
        duration=duration,
        weight=weight,
        length_pool=_number(record, "length_pool", "pool_length"),
        count_pool=_count(record, "count_pool", "pool_count"),
        len_step=len_step,
    )


def check_ranges(training: Workout) -> None:
    """Basic sanity on workout inputs; raises WorkoutInputError.

    Comparisons are written so that NaN fails them.
    """
    if not training.action >= 0:
        raise WorkoutInputError("Unit count must not be negative")
    if not training.duration > timedelta(0):
        raise WorkoutInputError("Duration must be positive")
    if not (training.weight > 0 and math.isfinite(training.weight)):
        raise WorkoutInputError("Weight must be a positive number")
    if not training.len_step >= 0 or math.isinf(training.len_step):
        raise WorkoutInputError("Step length must be a non-negative number")
    if isinstance(training, Walking) and not (training.height > 0 and math.isfinite(training.height)):
        raise WorkoutInputError("Height must be a positive number")
    if isinstance(training, Swimming):
        if not (training.length_pool >= 0 and math.isfinite(training.length_pool)) or not training.count_pool >= 0:
            raise WorkoutInputError("Pool length and count must not be negative")
