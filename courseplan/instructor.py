"""
Instructor records.

Instructors are stored exactly as scraped. Name formatting is left to
whatever displays them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Instructor:
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    middle_initial: Optional[str] = None

    @classmethod
    def from_snapshot(cls, snapshot: Instructor | dict[str, Any]) -> Instructor:
        if isinstance(snapshot, Instructor):
            return cls(**vars(snapshot))
        return cls(**snapshot)
