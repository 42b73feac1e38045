"""boxtable: render rows of text as box-drawn, width-balanced tables."""

# Errors
from boxtable.errors import (
    BoxTableError,
    InvalidOptionsError,
    MalformedInputError,
    MalformedStyleSequenceError,
)

# Row normalization
from boxtable.normalize import normalize_rows, split_cell_lines

# Configuration
from boxtable.options import (
    Corners,
    Junctions,
    Straight,
    TableOptions,
    options_from_dict,
    options_to_dict,
)

# Rendering
from boxtable.renderer import TableRenderer, render, render_lines

# Text utilities
from boxtable.utils import RESET, STYLE_RE, strip_styles, visible_width

# Column widths
from boxtable.widths import natural_widths, plan_column_widths

# Cell wrapping
from boxtable.wrap import StyleRun, divide_cell

__all__ = [
    # Errors
    "BoxTableError",
    "InvalidOptionsError",
    "MalformedInputError",
    "MalformedStyleSequenceError",
    # Row normalization
    "normalize_rows",
    "split_cell_lines",
    # Configuration
    "Corners",
    "Junctions",
    "Straight",
    "TableOptions",
    "options_from_dict",
    "options_to_dict",
    # Rendering
    "TableRenderer",
    "render",
    "render_lines",
    # Text utilities
    "RESET",
    "STYLE_RE",
    "strip_styles",
    "visible_width",
    # Column widths
    "natural_widths",
    "plan_column_widths",
    # Cell wrapping
    "StyleRun",
    "divide_cell",
]
