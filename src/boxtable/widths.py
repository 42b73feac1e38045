"""Column width computation and balancing against a total width budget."""

from __future__ import annotations

import logging
from typing import Sequence

from boxtable.utils import Measure, visible_width

logger = logging.getLogger(__name__)


def natural_widths(rows: Sequence[Sequence[str]], measure: Measure = "chars") -> list[int]:
    """Widest visible cell per column, with style sequences excluded."""
    if not rows:
        return []
    widths = [0] * len(rows[0])
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], visible_width(cell, measure))
    return widths


def plan_column_widths(
    rows: Sequence[Sequence[str]],
    max_width: int | None = None,
    measure: Measure = "chars",
) -> list[int]:
    """Compute the final width of every column.

    With no *max_width* the natural widths are returned. Otherwise one
    character per column boundary (outer borders included) is reserved and,
    if the natural widths overflow what is left, every column wider than the
    even share is clipped to it. Narrower columns keep their natural width and
    the space they leave unused is not handed to the clipped columns.
    """
    widths = natural_widths(rows, measure)
    if max_width is None or not widths:
        return widths

    budget = max_width - (len(widths) + 1)
    if sum(widths) <= budget:
        return widths

    share = max(budget // len(widths), 1)
    clipped = [min(width, share) for width in widths]
    logger.debug(
        "Natural widths %s exceed budget %d, clipped to share %d: %s",
        widths, budget, share, clipped,
    )
    return clipped
