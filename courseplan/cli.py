"""
CLI (Command Line Interface).

Quick terminal commands over a snapshot file (see courseplan.storage):

    courseplan show <snapshots.json>
    courseplan conflicts <snapshots.json>
"""

from __future__ import annotations

import argparse
from typing import Any, Union

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from courseplan.conflicts import find_conflicts
from courseplan.model import Commitment, Course
from courseplan.schedule import CourseMeeting
from courseplan.storage import load_snapshots

console = Console()

Item = Union[Course, Commitment]


def _build_items(path: str) -> list[Item]:
    """
    Load the snapshot file and construct every course and commitment.

    Construction errors are NOT caught here; the caller decides.
    """
    course_snapshots, commitment_snapshots = load_snapshots(path)

    items: list[Item] = [Course.from_snapshot(s) for s in course_snapshots]
    items.extend(Commitment.from_snapshot(s) for s in commitment_snapshots)
    return items


def _item_label(item: Item) -> str:
    if isinstance(item, Course):
        return f"{item.department} {item.number} {item.course_name} ({item.unique_id})"
    return f"{item.course_name} ({item.unique_id})"


def _meeting_line(meeting: CourseMeeting) -> str:
    line = f"{meeting.get_days_string()} {meeting.get_time_string()}"
    if meeting.location is not None:
        line += f" {meeting.location}"
    return line


def _cmd_show(items: list[Item]) -> int:
    """
    Print every item with its (repaired) identifier, status and meetings.
    """
    table = Table(title=f"Items ({len(items)})", box=box.SIMPLE)
    table.add_column("Item")
    table.add_column("Status")
    table.add_column("Meetings")

    for item in items:
        status = item.status if isinstance(item, Course) else "commitment"
        meetings = "\n".join(_meeting_line(m) for m in item.schedule.meetings) or "-"
        table.add_row(escape(_item_label(item)), escape(str(status)), escape(meetings))

    console.print(table)
    return 0


def _cmd_conflicts(items: list[Item]) -> int:
    """
    Print all conflicting item pairs and their overlapping meetings.
    """
    confs = find_conflicts(items)
    if not confs:
        console.print("No conflicts found.")
        return 0

    total = sum(len(pairs) for _, _, pairs in confs)
    console.print(f"Conflicts found: {total}")

    table = Table(title="Conflict pairs", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Pair")
    table.add_column("Meetings")

    for i, (a, b, pairs) in enumerate(confs, start=1):
        pair_label = f"{_item_label(a)}  <->  {_item_label(b)}"
        meetings = "\n".join(f"{_meeting_line(ma)}  <->  {_meeting_line(mb)}" for ma, mb in pairs)
        table.add_row(str(i), escape(pair_label), escape(meetings))

    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="courseplan", description="Course schedule conflict checker")
    sub = parser.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", help="List courses and commitments in a snapshot file")
    p_show.add_argument("file", type=str, help="Snapshot JSON file")

    p_conflicts = sub.add_parser("conflicts", help="Show schedule conflicts in a snapshot file")
    p_conflicts.add_argument("file", type=str, help="Snapshot JSON file")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args: Any = parser.parse_args(argv)

    try:
        items = _build_items(args.file)
    except (TypeError, KeyError, ValueError, AttributeError) as exc:
        console.print(f"Could not read snapshot: {escape(str(exc))}")
        raise SystemExit(1)

    if not items:
        console.print(f"No courses found in {escape(args.file)}")
        raise SystemExit(1)

    if args.command == "show":
        raise SystemExit(_cmd_show(items))
    if args.command == "conflicts":
        raise SystemExit(_cmd_conflicts(items))

    raise SystemExit(2)
