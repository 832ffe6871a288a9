"""
Course display colors.

Every course and commitment carries a primary/secondary color pair.
When a snapshot has no colors, the pair is looked up from a small
Tailwind-style palette (theme name + shade).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


DEFAULT_THEME = "emerald"
DEFAULT_SHADE = 500

# secondary color = shade + offset (500 -> 800)
COLOR_OFFSET = 300


PALETTE: dict[str, dict[int, str]] = {
    "emerald": {
        50: "#ecfdf5",
        100: "#d1fae5",
        200: "#a7f3d0",
        300: "#6ee7b7",
        400: "#34d399",
        500: "#10b981",
        600: "#059669",
        700: "#047857",
        800: "#065f46",
        900: "#064e3b",
        950: "#022c22",
    },
    "sky": {
        50: "#f0f9ff",
        100: "#e0f2fe",
        200: "#bae6fd",
        300: "#7dd3fc",
        400: "#38bdf8",
        500: "#0ea5e9",
        600: "#0284c7",
        700: "#0369a1",
        800: "#075985",
        900: "#0c4a6e",
        950: "#082f49",
    },
    "indigo": {
        50: "#eef2ff",
        100: "#e0e7ff",
        200: "#c7d2fe",
        300: "#a5b4fc",
        400: "#818cf8",
        500: "#6366f1",
        600: "#4f46e5",
        700: "#4338ca",
        800: "#3730a3",
        900: "#312e81",
        950: "#1e1b4b",
    },
    "rose": {
        50: "#fff1f2",
        100: "#ffe4e6",
        200: "#fecdd3",
        300: "#fda4af",
        400: "#fb7185",
        500: "#f43f5e",
        600: "#e11d48",
        700: "#be123c",
        800: "#9f1239",
        900: "#881337",
        950: "#4c0519",
    },
    "amber": {
        50: "#fffbeb",
        100: "#fef3c7",
        200: "#fde68a",
        300: "#fcd34d",
        400: "#fbbf24",
        500: "#f59e0b",
        600: "#d97706",
        700: "#b45309",
        800: "#92400e",
        900: "#78350f",
        950: "#451a03",
    },
}


@dataclass
class CourseColors:
    """
    Primary/secondary color pair used when a course is displayed.
    """

    primary_color: str
    secondary_color: str

    @classmethod
    def from_snapshot(cls, snapshot: CourseColors | dict[str, Any]) -> CourseColors:
        """
        Build a new, unaliased color pair from a dict or another CourseColors.
        """
        if isinstance(snapshot, CourseColors):
            return cls(snapshot.primary_color, snapshot.secondary_color)
        return cls(**snapshot)

    def to_snapshot(self) -> dict[str, str]:
        return asdict(self)


def get_course_colors(theme: str, shade: int = DEFAULT_SHADE, offset: int = COLOR_OFFSET) -> CourseColors:
    """
    Look up a color pair: primary = palette[theme][shade],
    secondary = palette[theme][shade + offset].

    Raises ValueError for an unknown theme or shade.
    """
    shades = PALETTE.get(theme)
    if shades is None:
        raise ValueError(f"Unknown color theme: {theme!r}")

    secondary_shade = shade + offset
    if shade not in shades or secondary_shade not in shades:
        raise ValueError(f"Unknown shade for {theme!r}: {shade} (+{offset})")

    return CourseColors(primary_color=shades[shade], secondary_color=shades[secondary_shade])
