"""
Course schedules and meetings.

A schedule is an ordered list of meetings. One meeting is a set of
weekdays plus a time slot (minutes since midnight) and an optional
location.

Overlap rule:
    share at least one day AND start < other_end AND end > other_start
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Day(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


# Registrar-style abbreviations
DAY_ABBREVIATIONS = {
    Day.MONDAY.value: "M",
    Day.TUESDAY.value: "T",
    Day.WEDNESDAY.value: "W",
    Day.THURSDAY.value: "TH",
    Day.FRIDAY.value: "F",
    Day.SATURDAY.value: "S",
    Day.SUNDAY.value: "SU",
}


def _minutes_to_clock(minutes: int) -> str:
    """
    Convert minutes since midnight to 'H:MM AM' / 'H:MM PM'.
    """
    hours, mins = divmod(int(minutes), 60)
    meridian = "AM" if hours % 24 < 12 else "PM"
    hours = hours % 12 or 12
    return f"{hours}:{mins:02d} {meridian}"


def _overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return a_start < b_end and a_end > b_start


@dataclass(frozen=True)
class Location:
    building: str
    room: str

    def __str__(self) -> str:
        return f"{self.building} {self.room}".strip()


@dataclass(frozen=True)
class CourseMeeting:
    """
    One weekly meeting slot of a course.

    start_time / end_time are minutes since midnight (e.g. 570 = 9:30 AM).
    """

    days: tuple[str, ...]
    start_time: int
    end_time: int
    location: Optional[Location] = None

    @classmethod
    def from_snapshot(cls, snapshot: CourseMeeting | dict[str, Any]) -> CourseMeeting:
        if isinstance(snapshot, CourseMeeting):
            return cls(snapshot.days, snapshot.start_time, snapshot.end_time, snapshot.location)

        data = dict(snapshot)
        location = data.pop("location", None)
        if isinstance(location, dict):
            location = Location(**location)
        data["days"] = tuple(d.value if isinstance(d, Day) else d for d in data.get("days", ()))
        return cls(location=location, **data)

    def to_snapshot(self) -> dict[str, Any]:
        location = None
        if self.location is not None:
            location = {"building": self.location.building, "room": self.location.room}
        return {
            "days": list(self.days),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "location": location,
        }

    def is_conflicting(self, other: CourseMeeting) -> bool:
        """
        True if both meetings share a day and their time slots overlap.

        Touching endpoints (end == start) is NOT a conflict, and a meeting
        with end <= start never conflicts.
        """
        if self.end_time <= self.start_time or other.end_time <= other.start_time:
            return False
        if not set(self.days) & set(other.days):
            return False
        return _overlaps(self.start_time, self.end_time, other.start_time, other.end_time)

    def get_days_string(self, short: bool = True, separator: str = "") -> str:
        """
        'MWF' style (short) or 'Monday, Wednesday' style (long, with separator=', ').
        """
        if short:
            return separator.join(DAY_ABBREVIATIONS.get(d, d) for d in self.days)
        return separator.join(self.days)

    def get_time_string(self, separator: str = "-") -> str:
        return f"{_minutes_to_clock(self.start_time)}{separator}{_minutes_to_clock(self.end_time)}"


@dataclass(frozen=True)
class CourseSchedule:
    meetings: tuple[CourseMeeting, ...] = field(default_factory=tuple)

    @classmethod
    def from_snapshot(cls, snapshot: CourseSchedule | dict[str, Any] | None) -> CourseSchedule:
        """
        Rebuild a schedule (and every meeting in it) from its snapshot.
        None gives an empty schedule.
        """
        if snapshot is None:
            return cls()
        meetings = snapshot.meetings if isinstance(snapshot, CourseSchedule) else snapshot.get("meetings", [])
        return cls(meetings=tuple(CourseMeeting.from_snapshot(m) for m in meetings))

    def to_snapshot(self) -> dict[str, Any]:
        return {"meetings": [m.to_snapshot() for m in self.meetings]}
