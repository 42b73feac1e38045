"""Split multi-line cells into stacked rows."""

from __future__ import annotations

import re
from typing import Any, Sequence

from boxtable.errors import MalformedInputError

_LINE_BREAK_RE = re.compile(r"\r?\n")


def _cell_text(cell: Any) -> str:
    if cell is None:
        return ""
    return cell if isinstance(cell, str) else str(cell)


def split_cell_lines(text: str) -> list[str]:
    """Split *text* on line breaks, dropping empty lines left by a trailing break.

    Always returns at least one (possibly empty) line.
    """
    lines = _LINE_BREAK_RE.split(text)
    while len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def normalize_rows(
    rows: Sequence[Sequence[Any]],
    space_linebroken: bool = True,
) -> list[list[str]]:
    """Expand every row whose cells contain line breaks into stacked rows.

    Sub-line *i* of every cell forms stacked row *i*; shorter cells are padded
    with empty strings. When a row expands to more than one stacked row and
    *space_linebroken* is set, an all-blank row is appended after it.

    Raises :class:`MalformedInputError` if a row's cell count differs from the
    first row's.
    """
    result: list[list[str]] = []
    expected: int | None = None

    for row_index, row in enumerate(rows):
        cells = [_cell_text(cell) for cell in row]
        if expected is None:
            expected = len(cells)
        elif len(cells) != expected:
            raise MalformedInputError(row_index, expected, len(cells))

        split_cells = [split_cell_lines(text) for text in cells]
        height = max((len(lines) for lines in split_cells), default=1)

        for i in range(height):
            result.append([lines[i] if i < len(lines) else "" for lines in split_cells])

        if space_linebroken and height > 1:
            result.append([""] * len(cells))

    return result
