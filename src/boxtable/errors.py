"""Exception types raised by boxtable."""

from __future__ import annotations


class BoxTableError(Exception):
    """Base class for every error raised by boxtable."""


class MalformedInputError(BoxTableError, ValueError):
    """A row does not have the same number of cells as the first row."""

    def __init__(self, row_index: int, expected: int, actual: int) -> None:
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_index} has {actual} cells, expected {expected}"
        )


class MalformedStyleSequenceError(BoxTableError, ValueError):
    """A style sequence is unterminated or does not have the ``ESC[...m`` shape."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(
            f"Malformed style sequence at position {position}: {text!r}"
        )


class InvalidOptionsError(BoxTableError, ValueError):
    """A table option was rejected at construction."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(f"Invalid option {name!r}: {message}")
