"""
Loading course / commitment snapshots from disk.

A snapshot file is JSON in one of two shapes:

    [ {course}, {course}, ... ]
    {"courses": [ ... ], "commitments": [ ... ]}

This module only reads the plain dicts. Turning them into Course and
Commitment objects is done by courseplan.model.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _only_dicts(items: Any) -> list[dict[str, Any]]:
    if not isinstance(items, list):
        return []
    return [x for x in items if isinstance(x, dict)]


def load_snapshots(path: str | Path) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """
    Load (course_snapshots, commitment_snapshots) from a JSON file.

    Returns two empty lists if the file does not exist or is invalid.
    Entries that are not JSON objects are skipped.
    """
    snapshot_path = Path(path)

    if not snapshot_path.exists():
        return [], []

    try:
        data = json.loads(snapshot_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError):
        return [], []

    if isinstance(data, list):
        return _only_dicts(data), []
    if isinstance(data, dict):
        return _only_dicts(data.get("courses", [])), _only_dicts(data.get("commitments", []))
    return [], []
