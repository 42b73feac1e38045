"""Divide a cell into fixed-width lines without splitting style sequences.

The cell is scanned into *buckets*, each holding exactly ``width`` visible
units. Style sequences are recorded as :class:`StyleRun` entries at their
position in the bucket's plain text instead of being counted. When a bucket
fills up, every run it recorded is closed with a reset at the end of the
line and re-opened, verbatim and in the original order, at the start of the
next bucket. Runs are never paired: a sequence that is itself a reset is
closed and re-opened like any other, so resets compound across lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from boxtable.utils import RESET, STYLE, Measure, iter_units, unit_width


@dataclass
class StyleRun:
    text: str
    position: int


@dataclass
class _Bucket:
    content: str = ""
    width: int = 0
    runs: list[StyleRun] = field(default_factory=list)

    def reopen(self) -> _Bucket:
        """Start the next bucket, re-opening every run recorded in this one."""
        return _Bucket(runs=[StyleRun(run.text, 0) for run in self.runs])

    def pad(self, width: int) -> None:
        if self.width < width:
            self.content += " " * (width - self.width)
            self.width = width

    def materialize(self) -> str:
        text = self.content + RESET * len(self.runs)
        # Descending positions keep earlier insertion indices valid; ties are
        # inserted last-first so they end up in their original order.
        ordered = sorted(self.runs, key=lambda run: run.position)
        for run in reversed(ordered):
            text = text[: run.position] + run.text + text[run.position :]
        return text


def divide_cell(text: str, width: int, measure: Measure = "chars") -> list[str]:
    """Split *text* into lines of exactly *width* visible units.

    Lines shorter than *width* are right-padded with spaces. Always returns at
    least one line. Raises :class:`ValueError` if *width* is below 1 and
    :class:`~boxtable.errors.MalformedStyleSequenceError` on a malformed
    style sequence.
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")

    buckets: list[_Bucket] = []
    current = _Bucket()

    for kind, unit in iter_units(text, measure):
        if kind == STYLE:
            current.runs.append(StyleRun(unit, len(current.content)))
            continue

        w = unit_width(unit, measure)
        if current.width > 0 and current.width + w > width:
            # Only reachable with wide units in "cells" mode
            current.pad(width)
            buckets.append(current)
            current = current.reopen()

        current.content += unit
        current.width += w
        if current.width < width:
            continue

        buckets.append(current)
        current = current.reopen()

    if current.content or not buckets:
        current.pad(width)
        buckets.append(current)

    return [bucket.materialize() for bucket in buckets]
