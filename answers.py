"""Answer record helpers for runner outputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional


def answers_path(answers_dir: Path, day: int) -> Path:
    return answers_dir / f"day{day:02d}.json"


def save_answers(
    day: int,
    part_1: int,
    part_2: int,
    path: Path,
    runtime: Optional[float],
    input_path: Optional[Path] = None,
    timings: Optional[Dict[str, float]] = None,
) -> None:
    """Write a JSON record with both answers, the input used, and runtimes."""
    data = {
        "day": day,
        "part_1": part_1,
        "part_2": part_2,
        "runtime_seconds": runtime,
        "timings": dict(timings) if timings else None,
        "input": str(input_path) if input_path else None,
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))
