"""
Input/output helpers for the lights solver.

This module reads a start/target pair from a text stream, loads JSON case
files for batch runs and writes the batch results back as JSON.
"""

from __future__ import annotations

import json
from typing import Any, Dict, TextIO, Tuple


def read_pair(stream: TextIO) -> Tuple[str, str]:
    """Read the start and target rows, one per line.

    Trailing whitespace is stripped. A missing line comes back as an empty
    string, which the parser rejects with ``NoLightError``.
    """
    start = stream.readline().rstrip()
    target = stream.readline().rstrip()
    return start, target


def load_cases(path: str) -> Dict[str, Dict[str, Any]]:
    """Load a JSON object mapping case ids to ``{"start", "target", "limit"?}``.

    Raises ValueError if the file does not hold such an object.
    """
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object keyed by case id")
    for case_id, case in data.items():
        if not isinstance(case, dict) or "start" not in case or "target" not in case:
            raise ValueError(f"{path}: case {case_id!r} needs 'start' and 'target'")
    return data


def save_results(obj: Dict[str, Any], out_path: str = "results.json") -> str:
    """Write batch results to a JSON file and return its path."""
    with open(out_path, "w") as f:
        json.dump(obj, f, indent=2)
    return out_path
