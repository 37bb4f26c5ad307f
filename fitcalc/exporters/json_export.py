"""JSON export helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from fitcalc.core.models import WorkoutSummary


def summaries_payload(summaries: List[WorkoutSummary]) -> Dict[str, Any]:
    """Build the JSON document for a list of summaries."""
    return {
        "workouts": [summary.to_dict() for summary in summaries],
        "summary": {
            "total": len(summaries),
            "calories": round(sum(summary.calories for summary in summaries), 2),
        },
    }


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n")
    return path
