from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from fitcalc.core.models import Running, Swimming, Walking


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("FITCALC_CONFIG_FILE", str(path))
    return path


@pytest.fixture()
def swimming() -> Swimming:
    return Swimming(
        label="Swimming",
        action=2000,
        duration=timedelta(minutes=90),
        weight=85,
        length_pool=50,
        count_pool=5,
    )


@pytest.fixture()
def walking() -> Walking:
    return Walking(
        label="Walking",
        action=20000,
        duration=timedelta(hours=3, minutes=45),
        weight=85,
        height=185,
    )


@pytest.fixture()
def running() -> Running:
    return Running(label="Running", action=5000, duration=timedelta(minutes=30), weight=85)


@pytest.fixture()
def sample_records() -> List[Dict[str, Any]]:
    return [
        {"type": "swimming", "action": 2000, "duration": 90, "weight": 85, "length_pool": 50, "count_pool": 5},
        {"type": "walking", "action": 20000, "duration": "3h45m", "weight": 85, "height": 185},
        {"type": "running", "action": 5000, "duration": "30:00", "weight": 85},
    ]


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write
