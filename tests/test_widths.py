"""Tests for boxtable.widths -- column width planning."""

from __future__ import annotations

import logging

import pytest

from boxtable.widths import natural_widths, plan_column_widths


class TestNaturalWidths:
    """Natural width is the widest visible cell of each column."""

    def test_widest_cell_per_column(self) -> None:
        rows = [["a", "bbb"], ["cc", "d"]]
        assert natural_widths(rows) == [2, 3]

    def test_style_sequences_excluded(self) -> None:
        rows = [["\x1b[38;2;1;2;3mab\x1b[m", "x"]]
        assert natural_widths(rows) == [2, 1]

    def test_no_rows(self) -> None:
        assert natural_widths([]) == []

    def test_cells_measure(self) -> None:
        assert natural_widths([["世界"]], measure="cells") == [4]
        assert natural_widths([["世界"]]) == [2]


class TestPlanColumnWidths:
    """Widths are clipped to an even share when they overflow the budget."""

    def test_unbounded_returns_natural(self) -> None:
        rows = [["short", "x" * 100]]
        assert plan_column_widths(rows) == [5, 100]

    def test_fitting_widths_unchanged(self) -> None:
        rows = [["abc", "de"]]
        # budget = 8 - 3 = 5
        assert plan_column_widths(rows, max_width=8) == [3, 2]

    def test_wide_columns_clipped_to_share(self) -> None:
        rows = [["short", "im long " * 5, "just a bit"]]
        # budget = 20 - 4 = 16, share = 5
        assert plan_column_widths(rows, max_width=20) == [5, 5, 5]

    def test_narrow_columns_keep_natural_width(self) -> None:
        rows = [["ab", "x" * 40, "y" * 40]]
        # budget = 31 - 4 = 27, share = 9
        assert plan_column_widths(rows, max_width=31) == [2, 9, 9]

    def test_unused_space_not_redistributed(self) -> None:
        rows = [["a", "x" * 40]]
        # budget = 23 - 3 = 20, share = 10; column one leaves 9 unused
        assert plan_column_widths(rows, max_width=23) == [1, 10]

    @pytest.mark.parametrize("max_width", [0, 1, 3, 5])
    def test_share_never_below_one(self, max_width: int) -> None:
        rows = [["abc", "def"]]
        assert plan_column_widths(rows, max_width=max_width) == [1, 1]

    def test_logs_clipping(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="boxtable.widths"):
            plan_column_widths([["x" * 10]], max_width=5)
        assert "clipped to share 3" in caplog.text
