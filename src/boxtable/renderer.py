"""Assemble normalized rows into a bordered, width-balanced text grid."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Sequence

from boxtable.normalize import normalize_rows
from boxtable.options import TableOptions, options_from_dict
from boxtable.widths import plan_column_widths
from boxtable.wrap import divide_cell

logger = logging.getLogger(__name__)


class TableRenderer:
    """Render rows of cells as a box-drawn table.

    Usage::

        renderer = TableRenderer(TableOptions(padding=0, max_width=40))
        print(renderer.render([["name", "value"], ["a", "1"]]), end="")
    """

    def __init__(self, options: TableOptions | None = None) -> None:
        self.options = options or TableOptions()

    def render(self, rows: Sequence[Sequence[Any]]) -> str:
        return "".join(line + "\n" for line in self.render_lines(rows))

    def render_lines(self, rows: Sequence[Sequence[Any]]) -> list[str]:
        """Render *rows* into the table's lines, without line terminators."""
        opts = self.options
        normalized = normalize_rows(rows, opts.space_linebroken)
        max_width = None if opts.is_unbounded else int(opts.max_width)  # type: ignore[arg-type]
        widths = plan_column_widths(normalized, max_width, opts.measure)

        lines: list[str] = [self._border(widths, top=True)]
        for row in normalized:
            lines.extend(self._render_row(row, widths))
        lines.append(self._border(widths, top=False))

        logger.debug(
            "Rendered %d rows (%d after normalization) with column widths %s",
            len(rows), len(normalized), widths,
        )
        return lines

    # ------------------------------------------------------------------
    # Borders
    # ------------------------------------------------------------------

    def _border(self, widths: list[int], top: bool) -> str:
        opts = self.options
        horizontal = opts.straight.horizontal
        if top:
            left, right, junction = (
                opts.corners.top_right, opts.corners.top_left, opts.junctions.top,
            )
        else:
            left, right, junction = (
                opts.corners.bottom_right, opts.corners.bottom_left, opts.junctions.bottom,
            )

        runs = [horizontal * (width + opts.padding * 2) for width in widths]
        return left + junction.join(runs) + right

    # ------------------------------------------------------------------
    # Content rows
    # ------------------------------------------------------------------

    def _wrap_cell(self, cell: str, width: int) -> list[str]:
        if width == 0:
            # Column of empty cells: padding only
            return [""]
        return divide_cell(cell, width, self.options.measure)

    def _render_row(self, row: list[str], widths: list[int]) -> list[str]:
        if not row:
            return []

        opts = self.options
        columns = [self._wrap_cell(cell, widths[idx]) for idx, cell in enumerate(row)]

        height = max(len(column) for column in columns)
        if height > 1 and opts.space_linebroken:
            height += 1

        for idx, column in enumerate(columns):
            column.extend([" " * widths[idx]] * (height - len(column)))

        pad = " " * opts.padding
        vertical = opts.straight.vertical
        separator = pad + vertical + pad
        return [
            vertical + pad + separator.join(line_cells) + pad + vertical
            for line_cells in zip(*columns)
        ]


def render_lines(
    rows: Sequence[Sequence[Any]],
    options: TableOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> list[str]:
    """Like :func:`render` but return the lines without newlines."""
    return TableRenderer(_resolve_options(options, overrides)).render_lines(rows)


def render(
    rows: Sequence[Sequence[Any]],
    options: TableOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Render *rows* as a bordered table string ending in a newline.

    *options* may be a :class:`TableOptions`, a plain mapping overlaid onto
    the defaults, or ``None``. Keyword *overrides* are applied last.
    """
    return TableRenderer(_resolve_options(options, overrides)).render(rows)


def _resolve_options(
    options: TableOptions | Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
) -> TableOptions:
    if options is None:
        resolved = TableOptions()
    elif isinstance(options, TableOptions):
        resolved = options
    else:
        resolved = options_from_dict(options)

    if overrides:
        merged = {**_shallow_dict(resolved), **overrides}
        resolved = options_from_dict(merged)
    return resolved


def _shallow_dict(options: TableOptions) -> dict[str, Any]:
    return {f.name: getattr(options, f.name) for f in dataclasses.fields(options)}
