"""
Central data model definitions used across the project.

This module defines the canonical Course and Commitment objects:
- a Course is one registrar course section (status, instructors, semester ...)
- a Commitment is any other weekly obligation sharing a schedule and colors

Both are built once from a snapshot (a plain dict as it comes out of
json.loads) and are treated as read-only afterwards.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Optional

from courseplan.colors import DEFAULT_SHADE, DEFAULT_THEME, CourseColors, get_course_colors
from courseplan.conflicts import get_conflicts
from courseplan.instructor import Instructor
from courseplan.schedule import CourseMeeting, CourseSchedule


# UT prefixes summer course numbers with
# [f]irst term, [s]econd term, [n]ine week term, [w]hole term
SUMMER_TERM_PREFIXES = ("f", "s", "n", "w")

_LEADING_NON_DIGIT_RE = re.compile(r"^\D")


class Status(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    WAITLISTED = "WAITLISTED"
    CANCELLED = "CANCELLED"


class InstructionMode(str, Enum):
    ONLINE = "Online"
    IN_PERSON = "In Person"
    HYBRID = "Hybrid"


class Season(str, Enum):
    FALL = "Fall"
    SPRING = "Spring"
    SUMMER = "Summer"


def clean_summer_term(department: str, number: str) -> tuple[str, str]:
    """
    Move a summer-term letter from the department onto the course number.

    An old scraper stored the summer term at the end of the department
    ('P R f', '378') instead of in front of the number ('P R', 'f378').

    Examples:
        ('C S',   '314H') -> ('C S', '314H')
        ('P R',   'f378') -> ('P R', 'f378')
        ('P R f', '378')  -> ('P R', 'f378')
        ('P S n', '303')  -> ('P S', 'n303')
    """
    term = department[-1:]
    if term not in SUMMER_TERM_PREFIXES:
        return department, number

    return department[:-1].strip(), term + number


def _now_ms() -> int:
    return int(time.time() * 1000)


def _resolve_colors(
    colors: CourseColors | dict[str, Any] | None,
    get_default_colors: Callable[[str, int], CourseColors],
) -> CourseColors:
    # never alias the caller's color object; an empty mapping counts as absent
    if colors:
        return CourseColors.from_snapshot(colors)
    return get_default_colors(DEFAULT_THEME, DEFAULT_SHADE)


@dataclass(frozen=True)
class Semester:
    """
    The semester a course is offered in.
    """

    year: int
    season: str
    code: Optional[str] = None

    @classmethod
    def from_snapshot(cls, snapshot: Semester | dict[str, Any]) -> Semester:
        if isinstance(snapshot, Semester):
            return snapshot
        return cls(**snapshot)

    @property
    def is_summer(self) -> bool:
        return self.season == Season.SUMMER


@dataclass(frozen=True)
class Course:
    """
    One course section as scraped from the registrar.

    number may carry a summer-term prefix ('f301'); department is the
    registrar's department code ('C S'). status, instruction_mode and
    semester.season hold the raw strings (see Status, InstructionMode,
    Season); unknown values are stored as given.
    """

    unique_id: int
    number: str
    full_name: str
    course_name: str
    department: str
    credit_hours: float
    status: str
    instructors: list[Instructor]
    is_reserved: bool
    schedule: CourseSchedule
    url: str
    flags: list[str]
    instruction_mode: str
    semester: Semester
    scraped_at: int
    colors: CourseColors
    core: list[str] = field(default_factory=list)
    description: Optional[list[str]] = None
    register_url: Optional[str] = None

    @classmethod
    def from_snapshot(
        cls,
        snapshot: dict[str, Any],
        get_default_colors: Callable[[str, int], CourseColors] = get_course_colors,
    ) -> Course:
        """
        Build a Course from a snapshot dict.

        - schedule, instructors and semester are rebuilt as owned objects
        - scraped_at missing/0 -> now (epoch milliseconds)
        - colors missing or empty -> default theme colors, otherwise a deep copy
        - core missing -> []
        - Summer courses get their department/number repaired

        Unknown or missing keys raise TypeError.
        """
        data = dict(snapshot)

        data["schedule"] = CourseSchedule.from_snapshot(data.get("schedule"))
        data["instructors"] = [Instructor.from_snapshot(i) for i in data["instructors"]]
        data["semester"] = Semester.from_snapshot(data["semester"])
        data["scraped_at"] = data.get("scraped_at") or _now_ms()
        data["colors"] = _resolve_colors(data.get("colors"), get_default_colors)
        if data.get("core") is None:
            data["core"] = []

        if data["semester"].is_summer:
            data["department"], data["number"] = clean_summer_term(data["department"], data["number"])

        return cls(**data)

    def to_snapshot(self) -> dict[str, Any]:
        """
        Plain-dict form of this course; Course.from_snapshot() accepts it back.
        """
        out: dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        out["schedule"] = self.schedule.to_snapshot()
        out["instructors"] = [vars(i).copy() for i in self.instructors]
        out["semester"] = vars(self.semester).copy()
        out["colors"] = self.colors.to_snapshot()
        out["core"] = list(self.core)
        out["flags"] = list(self.flags)
        if self.description is not None:
            out["description"] = list(self.description)
        return out

    def number_without_term(self) -> str:
        """
        Course number without the summer term: 'f301' -> '301'.
        """
        return _LEADING_NON_DIGIT_RE.sub("", self.number)

    def get_conflicts(self, other: Course | Commitment) -> list[tuple[CourseMeeting, CourseMeeting]]:
        """
        All (my_meeting, other_meeting) pairs that overlap.
        """
        return get_conflicts(self, other)


@dataclass(frozen=True)
class Commitment:
    """
    A non-course weekly obligation (job, club, ...) that still needs
    a schedule and display colors, but has no registrar data.
    """

    unique_id: int
    number: str
    full_name: str
    course_name: str
    schedule: CourseSchedule
    colors: CourseColors
    description: Optional[list[str]] = None

    @classmethod
    def from_snapshot(
        cls,
        snapshot: dict[str, Any],
        get_default_colors: Callable[[str, int], CourseColors] = get_course_colors,
    ) -> Commitment:
        data = dict(snapshot)
        data["schedule"] = CourseSchedule.from_snapshot(data.get("schedule"))
        data["colors"] = _resolve_colors(data.get("colors"), get_default_colors)
        return cls(**data)

    def get_conflicts(self, other: Course | Commitment) -> list[tuple[CourseMeeting, CourseMeeting]]:
        return get_conflicts(self, other)
