"""
Conflict detection.

Given two scheduled items (courses or commitments), list every pair of
meetings, one from each, that overlap. The meeting-level rule lives in
CourseMeeting.is_conflicting:
    shared day AND start < other_end AND end > other_start
"""

from __future__ import annotations

from typing import Any, Sequence

from courseplan.schedule import CourseMeeting


def get_conflicts(a: Any, b: Any) -> list[tuple[CourseMeeting, CourseMeeting]]:
    """
    Return all (meeting_from_a, meeting_from_b) pairs that conflict.

    Order: outer loop over a's meetings, inner loop over b's meetings,
    each in schedule order. Swapping a and b swaps every pair.
    """
    conflicts: list[tuple[CourseMeeting, CourseMeeting]] = []
    for meeting in a.schedule.meetings:
        for other_meeting in b.schedule.meetings:
            if meeting.is_conflicting(other_meeting):
                conflicts.append((meeting, other_meeting))
    return conflicts


def find_conflicts(items: Sequence[Any]) -> list[tuple[Any, Any, list[tuple[CourseMeeting, CourseMeeting]]]]:
    """
    Compare every pair of items (i < j) and keep the pairs that conflict.

    Returns (item_a, item_b, meeting_pairs) triples.
    """
    out: list[tuple[Any, Any, list[tuple[CourseMeeting, CourseMeeting]]]] = []

    # O(n^2) is fine for typical uni schedule sizes
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            pairs = get_conflicts(items[i], items[j])
            if pairs:
                out.append((items[i], items[j], pairs))

    return out
