from .formatting import (
    commify,
    format_cost,
    format_gwei,
    format_percent,
    indent_text,
    is_below_precision,
    smallest_precision_value,
    start_case,
    styled,
)
from .table import REPORT_BORDERS, Align, BorderChars, Cell, Table

__all__ = [
    "Align",
    "BorderChars",
    "Cell",
    "commify",
    "format_cost",
    "format_gwei",
    "format_percent",
    "indent_text",
    "is_below_precision",
    "REPORT_BORDERS",
    "smallest_precision_value",
    "start_case",
    "styled",
    "Table",
]
