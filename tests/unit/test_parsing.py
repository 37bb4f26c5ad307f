from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path

import pytest

from fitcalc.core.models import Running, Swimming, Walking
from fitcalc.utils.parsing import (
    WorkoutInputError,
    build_workout,
    check_ranges,
    load_workout_input,
    parse_duration,
    workout_kind,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1:30:00", timedelta(hours=1, minutes=30)),
        ("30:00", timedelta(minutes=30)),
        ("00:45", timedelta(seconds=45)),
        ("3h45m", timedelta(hours=3, minutes=45)),
        ("90min", timedelta(minutes=90)),
        ("1h30m15s", timedelta(hours=1, minutes=30, seconds=15)),
        ("45s", timedelta(seconds=45)),
        ("90", timedelta(minutes=90)),
        ("1.5", timedelta(seconds=90)),
        (30, timedelta(minutes=30)),
        (7.5, timedelta(minutes=7, seconds=30)),
    ],
)
def test_parse_duration(value, expected: timedelta) -> None:
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "1:2:3:4", "1:xx", "h", True, "99999999999h", "9999999999999:00", float("nan"), 1e20])
def test_parse_duration_rejects_garbage(value) -> None:
    with pytest.raises(WorkoutInputError):
        parse_duration(value)


def test_workout_kind_aliases() -> None:
    assert workout_kind("Run") == "running"
    assert workout_kind("walk") == "walking"
    assert workout_kind(" SWIMMING ") == "swimming"
    with pytest.raises(WorkoutInputError):
        workout_kind("cycling")
    with pytest.raises(WorkoutInputError):
        workout_kind(None)


def test_build_workout_running_defaults() -> None:
    training = build_workout({"type": "run", "steps": 5000, "duration": "30m", "weight": 85})
    assert training == Running(label="Running", action=5000, duration=timedelta(minutes=30), weight=85.0)


def test_build_workout_walking_uses_config() -> None:
    config = {"labels": {"walking": "Nordic walk"}, "constants": {"len_step": 0.7}}
    training = build_workout(
        {"type": "walking", "action": 100, "duration": 60, "weight": 70, "height": 170},
        config,
    )
    assert isinstance(training, Walking)
    assert training.label == "Nordic walk"
    assert training.len_step == 0.7
    assert training.height == 170


def test_build_workout_swimming_aliases_and_defaults() -> None:
    training = build_workout(
        {"type": "swim", "strokes": 2000, "duration": "1:30:00", "weight": 85, "pool_length": 50, "pool_count": 5}
    )
    assert isinstance(training, Swimming)
    assert training.len_step == 1.38
    assert training.length_pool == 50
    assert training.count_pool == 5


def test_build_workout_record_overrides() -> None:
    training = build_workout(
        {"type": "running", "action": 10, "duration": 1, "weight": 60, "label": "Tempo", "len_step": 0.9}
    )
    assert training.label == "Tempo"
    assert training.len_step == 0.9


@pytest.mark.parametrize(
    "record,message",
    [
        ({"type": "running", "duration": 30, "weight": 85}, "action"),
        ({"type": "running", "action": 10, "weight": 85}, "duration"),
        ({"type": "running", "action": 10, "duration": 30}, "weight"),
        ({"type": "walking", "action": 10, "duration": 30, "weight": 85}, "height"),
        ({"type": "swimming", "action": 10, "duration": 30, "weight": 85, "count_pool": 2}, "length_pool"),
        ({"type": "running", "action": 10.5, "duration": 30, "weight": 85}, "whole number"),
        ({"type": "running", "action": 10, "duration": 30, "weight": "heavy"}, "number"),
    ],
)
def test_build_workout_errors(record, message: str) -> None:
    with pytest.raises(WorkoutInputError, match=message):
        build_workout(record)


def test_check_ranges_accepts_valid(running: Running, walking: Walking, swimming: Swimming) -> None:
    for training in (running, walking, swimming):
        check_ranges(training)


def test_check_ranges_rejects_bad_values() -> None:
    with pytest.raises(WorkoutInputError, match="Duration"):
        check_ranges(Running("Running", 10, timedelta(0), 80))
    with pytest.raises(WorkoutInputError, match="Weight"):
        check_ranges(Running("Running", 10, timedelta(minutes=1), 0))
    with pytest.raises(WorkoutInputError, match="Unit count"):
        check_ranges(Running("Running", -1, timedelta(minutes=1), 80))
    with pytest.raises(WorkoutInputError, match="Height"):
        check_ranges(Walking("Walking", 10, timedelta(minutes=1), 80, 0))


def test_load_workout_input_from_json(tmp_path: Path) -> None:
    path = tmp_path / "workouts.json"
    path.write_text(json.dumps([{"type": "run"}, {"type": "walk"}]))
    assert load_workout_input(file_path=path, read_stdin=False) == [{"type": "run"}, {"type": "walk"}]


def test_load_workout_input_rejects_non_object_entries(tmp_path: Path) -> None:
    path = tmp_path / "workouts.json"
    path.write_text(json.dumps([{"type": "run"}, "junk", {"type": "walk"}]))
    with pytest.raises(WorkoutInputError, match="Workout #2"):
        load_workout_input(file_path=path, read_stdin=False)


def test_load_workout_input_from_yaml_with_workouts_key(tmp_path: Path) -> None:
    path = tmp_path / "workouts.yaml"
    path.write_text("workouts:\n  - type: run\n    action: 10\n")
    assert load_workout_input(file_path=path, read_stdin=False) == [{"type": "run", "action": 10}]


def test_load_workout_input_single_object_from_stdin() -> None:
    assert load_workout_input(file_path=None, read_stdin=True, stdin_text='{"type": "swim"}') == [{"type": "swim"}]
    assert load_workout_input(file_path=None, read_stdin=True, stdin_text="type: swim\n") == [{"type": "swim"}]
    assert load_workout_input(file_path=None, read_stdin=True, stdin_text="   ") == []
    assert load_workout_input(file_path=None, read_stdin=False) == []


@pytest.mark.parametrize(
    "training",
    [
        Running("Running", 10, timedelta(minutes=1), float("nan")),
        Running("Running", 10, timedelta(minutes=1), float("inf")),
        Running("Running", 10, timedelta(minutes=1), 80, len_step=float("nan")),
        Walking("Walking", 10, timedelta(minutes=1), 80, float("nan")),
        Swimming("Swimming", 10, timedelta(minutes=1), 80, float("nan"), 2),
    ],
)
def test_check_ranges_rejects_nan_and_inf(training) -> None:
    with pytest.raises(WorkoutInputError):
        check_ranges(training)


def test_build_workout_rejects_non_numeric_len_step() -> None:
    with pytest.raises(WorkoutInputError, match="len_step"):
        build_workout({"type": "run", "action": 10, "duration": 5, "weight": 60, "len_step": "long"})
