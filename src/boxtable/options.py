"""Typed configuration for table rendering."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from boxtable.errors import InvalidOptionsError
from boxtable.utils import MEASURES, Measure


def _check_glyph(name: str, value: Any) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidOptionsError(name, f"expected a single character, got {value!r}")


@dataclass(frozen=True)
class Corners:
    # Labels are historical: "top_right" is drawn at the left end of the top border.
    top_right: str = "┌"
    top_left: str = "┐"
    bottom_right: str = "└"
    bottom_left: str = "┘"

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_glyph(f"corners.{f.name}", getattr(self, f.name))


@dataclass(frozen=True)
class Straight:
    vertical: str = "│"
    horizontal: str = "─"

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_glyph(f"straight.{f.name}", getattr(self, f.name))


@dataclass(frozen=True)
class Junctions:
    top: str = "┬"
    middle: str = "┼"
    bottom: str = "┴"

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_glyph(f"junctions.{f.name}", getattr(self, f.name))


@dataclass(frozen=True)
class TableOptions:
    """Rendering options.

    ``max_width`` of ``None`` (or ``math.inf``) leaves the table unbounded;
    finite values may be floats and are floored.
    ``measure`` selects raw character counting (``"chars"``) or terminal
    display cells (``"cells"``) for every width computation.
    """

    space_linebroken: bool = True
    padding: int = 1
    max_width: int | float | None = None
    corners: Corners = field(default_factory=Corners)
    straight: Straight = field(default_factory=Straight)
    junctions: Junctions = field(default_factory=Junctions)
    measure: Measure = "chars"

    def __post_init__(self) -> None:
        if not isinstance(self.space_linebroken, bool):
            raise InvalidOptionsError("space_linebroken", "expected a bool")
        if isinstance(self.padding, bool) or not isinstance(self.padding, int) or self.padding < 0:
            raise InvalidOptionsError("padding", f"expected a non-negative int, got {self.padding!r}")
        if self.max_width is not None and not (
            isinstance(self.max_width, numbers.Real)
            and not isinstance(self.max_width, bool)
            and self.max_width >= 0
        ):
            raise InvalidOptionsError(
                "max_width", f"expected None or a non-negative number, got {self.max_width!r}"
            )
        for name, group in (("corners", Corners), ("straight", Straight), ("junctions", Junctions)):
            if not isinstance(getattr(self, name), group):
                raise InvalidOptionsError(name, f"expected {group.__name__}")
        if self.measure not in MEASURES:
            raise InvalidOptionsError("measure", f"expected one of {MEASURES}, got {self.measure!r}")

    @property
    def is_unbounded(self) -> bool:
        return self.max_width is None or self.max_width == math.inf


_GROUPS: dict[str, type] = {
    "corners": Corners,
    "straight": Straight,
    "junctions": Junctions,
}


def _group_from_value(name: str, value: Any) -> Any:
    group = _GROUPS[name]
    if isinstance(value, group):
        return value
    if not isinstance(value, Mapping):
        raise InvalidOptionsError(name, f"expected a mapping or {group.__name__}")

    expected = {f.name for f in fields(group)}
    unknown = set(value) - expected
    if unknown:
        raise InvalidOptionsError(name, f"unknown keys {sorted(unknown)}")
    missing = expected - set(value)
    if missing:
        raise InvalidOptionsError(name, f"missing keys {sorted(missing)}")
    return group(**value)


def options_from_dict(data: Mapping[str, Any]) -> TableOptions:
    """Overlay a plain mapping onto the default options.

    Glyph groups (``corners``, ``straight``, ``junctions``) are replaced as a
    whole, so a mapping given for one of them must name every glyph.
    """
    known = {f.name for f in fields(TableOptions)}
    unknown = set(data) - known
    if unknown:
        raise InvalidOptionsError(sorted(unknown)[0], "unknown option")

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key in _GROUPS:
            kwargs[key] = _group_from_value(key, value)
        else:
            kwargs[key] = value
    return TableOptions(**kwargs)


def options_to_dict(options: TableOptions) -> dict[str, Any]:
    """Serialize *options* to a plain mapping accepted by :func:`options_from_dict`."""
    return {
        "space_linebroken": options.space_linebroken,
        "padding": options.padding,
        "max_width": options.max_width,
        "corners": {f.name: getattr(options.corners, f.name) for f in fields(Corners)},
        "straight": {f.name: getattr(options.straight, f.name) for f in fields(Straight)},
        "junctions": {f.name: getattr(options.junctions, f.name) for f in fields(Junctions)},
        "measure": options.measure,
    }
