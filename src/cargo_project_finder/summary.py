"""Human-readable table rendering for standard output."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from .models import Project


HEADER = ("Project Name", "Path")


def display_width(value: str) -> int:
    """Terminal columns taken by value; wide East Asian characters count twice."""
    width = 0
    for char in value:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def render_table(projects: Iterable[Project]) -> str:
    """Return a bordered two-column table of project names and paths."""
    rows = [HEADER] + [(project.display_name, project.path) for project in projects]
    widths = [max(display_width(row[col]) for row in rows) for col in range(len(HEADER))]

    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def format_row(row: tuple[str, str]) -> str:
        cells = (
            f" {value}{' ' * (width - display_width(value))} " for value, width in zip(row, widths)
        )
        return "|" + "|".join(cells) + "|"

    lines = [border, format_row(rows[0]), border]
    lines.extend(format_row(row) for row in rows[1:])
    if len(rows) > 1:
        lines.append(border)

    return "\n".join(lines) + "\n"
