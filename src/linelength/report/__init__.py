"""Table formatting package."""

from .table import (
    ColumnWidths,
    column_widths,
    format_header,
    format_row,
    integer_log10,
    render_report,
    write_report,
)

__all__ = [
    "ColumnWidths",
    "column_widths",
    "format_header",
    "format_row",
    "integer_log10",
    "render_report",
    "write_report",
]
