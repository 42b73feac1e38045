"""Style-sequence scanning and visible-width measurement.

A style sequence is ``ESC [`` followed by digits and semicolons and
terminated by ``m``. Style sequences occupy no width. Visible text is
measured either by raw character count (``"chars"``) or by terminal display
cells (``"cells"``), in which case wide CJK characters and emoji count as two.
"""

from __future__ import annotations

import functools
import re
import unicodedata
from typing import Iterator, Literal

import grapheme
import wcwidth as _wcwidth

from boxtable.errors import MalformedStyleSequenceError

Measure = Literal["chars", "cells"]

MEASURES: tuple[str, ...] = ("chars", "cells")

ESC = "\x1b"

# Generic reset appended when a bucket is closed
RESET = "\x1b[m"

STYLE_RE = re.compile(r"\x1b\[[0-9;]*m")

# Token kinds yielded by iter_units()
STYLE = "style"
TEXT = "text"


# ---------------------------------------------------------------------------
# Cell widths
# ---------------------------------------------------------------------------

# Codepoints that turn a multi-codepoint cluster into a two-cell emoji:
# VS16, ZWJ, skin tone modifiers and regional indicators.
_EMOJI_JOINERS = (
    (0xFE0F, 0xFE0F),
    (0x200D, 0x200D),
    (0x1F3FB, 0x1F3FF),
    (0x1F1E6, 0x1F1FF),
)

# Leading codepoints drawn as emoji: pictographs and miscellaneous symbols.
_EMOJI_LEADS = (
    (0x1F000, 0x10FFFF),
    (0x2600, 0x27BF),
)


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(lo <= cp <= hi for lo, hi in ranges)


def _is_emoji_cluster(cluster: str) -> bool:
    if any(_in_ranges(ord(ch), _EMOJI_JOINERS) for ch in cluster):
        return True
    return _in_ranges(ord(cluster[0]), _EMOJI_LEADS)


def _codepoint_cells(ch: str) -> int:
    cp = ord(ch)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0
    return max(_wcwidth.wcwidth(ch), 0)


def _cluster_cells(cluster: str) -> int:
    """Terminal cells taken by one grapheme cluster from :func:`iter_units`.

    Single codepoints go straight to wcwidth. Multi-codepoint clusters are
    two cells when they read as emoji, zero when they start with a mark or
    format character, and otherwise as wide as their base character.
    """
    if len(cluster) <= 1:
        return _codepoint_cells(cluster) if cluster else 0
    if _is_emoji_cluster(cluster):
        return 2
    if unicodedata.category(cluster[0]) in ("Mn", "Mc", "Me", "Cf"):
        return 0
    return _codepoint_cells(cluster[0])


@functools.lru_cache(maxsize=512)
def _text_cells(stripped: str) -> int:
    return sum(_cluster_cells(g) for g in grapheme.graphemes(stripped))


def unit_width(unit: str, measure: Measure = "chars") -> int:
    """Width of one visible unit as produced by :func:`iter_units`."""
    if measure == "chars":
        return len(unit)
    return _cluster_cells(unit)


# ---------------------------------------------------------------------------
# Style sequences
# ---------------------------------------------------------------------------

def strip_styles(text: str) -> str:
    """Remove every style sequence from *text*."""
    return STYLE_RE.sub("", text)


def extract_style_sequence(text: str, pos: int) -> tuple[str, int] | None:
    """Extract the style sequence starting at *pos* in *text*.

    Returns ``(code, length)``, or ``None`` if *pos* does not hold the
    introducer. Everything up to the next ``m`` belongs to the sequence;
    if there is no ``m`` left, or the consumed text is not ``ESC[<digits;>m``,
    :class:`MalformedStyleSequenceError` is raised.
    """
    if pos >= len(text) or text[pos] != ESC:
        return None

    end = text.find("m", pos + 1)
    if end == -1:
        raise MalformedStyleSequenceError(text[pos:], pos)

    code = text[pos : end + 1]
    if not STYLE_RE.fullmatch(code):
        raise MalformedStyleSequenceError(code, pos)
    return (code, len(code))


def iter_units(text: str, measure: Measure = "chars") -> Iterator[tuple[str, str]]:
    """Tokenize *text* into ``(STYLE, code)`` and ``(TEXT, unit)`` pairs.

    A visible unit is a single character in ``"chars"`` mode and a grapheme
    cluster in ``"cells"`` mode.
    """
    i = 0
    n = len(text)
    while i < n:
        extracted = extract_style_sequence(text, i)
        if extracted is not None:
            code, length = extracted
            yield (STYLE, code)
            i += length
            continue

        j = text.find(ESC, i)
        if j == -1:
            j = n
        run = text[i:j]
        if measure == "cells":
            for g in grapheme.graphemes(run):
                yield (TEXT, g)
        else:
            for ch in run:
                yield (TEXT, ch)
        i = j


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

def visible_width(text: str, measure: Measure = "chars") -> int:
    """Calculate the visible width of *text*, ignoring style sequences.

    In ``"chars"`` mode this is the raw character count. In ``"cells"`` mode
    grapheme clusters are measured with wcwidth and results for non-ASCII
    strings are cached.
    """
    if not text:
        return 0

    stripped = strip_styles(text)
    if measure == "chars":
        return len(stripped)

    # Fast ASCII path: all codepoints in 0x20..0x7E
    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    return _text_cells(stripped)
