"""Fixed-width table rendering for scan reports."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from linelength.config import FILE_HEADER, INDEX_HEADER, LENGTH_HEADER, TableLayout
from linelength.scan.models import FileResult, ScanReport


@dataclass(slots=True, frozen=True)
class ColumnWidths:
    """Display widths for the file, length, and index columns."""

    file: int
    length: int
    index: int


def integer_log10(value: int) -> int:
    """Return floor(log10(value)), with 0 for values below 10 including 0."""
    if value < 0:
        raise ValueError("integer_log10 requires a non-negative value.")
    return len(str(value)) - 1


def column_widths(
    results: Sequence[FileResult], layout: TableLayout | None = None
) -> ColumnWidths:
    """Size each column to its widest value, never below the header minimums."""
    effective = layout or TableLayout()
    longest_name = max((len(os.fsencode(result.file)) for result in results), default=0)
    max_length = max((result.length for result in results), default=0)
    max_index = max((result.index for result in results), default=0)
    return ColumnWidths(
        file=max(longest_name, effective.min_file_width),
        length=max(integer_log10(max_length) + 1, effective.min_length_width),
        index=max(integer_log10(max_index) + 1, effective.min_index_width),
    )


def format_header(widths: ColumnWidths) -> str:
    return (
        f"{FILE_HEADER:<{widths.file}} "
        f"{LENGTH_HEADER:<{widths.length}} "
        f"{INDEX_HEADER:<{widths.index}}"
    )


def format_row(result: FileResult, widths: ColumnWidths) -> str:
    return (
        f"{result.file:<{widths.file}} "
        f"{result.length:>{widths.length}} "
        f"{result.index:>{widths.index}}"
    )


def render_report(report: ScanReport, layout: TableLayout | None = None) -> list[str]:
    """Render header, one row per result, then one line per failure."""
    widths = column_widths(report.results, layout)
    lines = [format_header(widths)]
    lines.extend(format_row(result, widths) for result in report.results)
    lines.extend(failure.message for failure in report.failures)
    return lines


def write_report(
    report: ScanReport, out_stream: TextIO, layout: TableLayout | None = None
) -> None:
    """Write the rendered report, one newline-terminated line at a time."""
    for line in render_report(report, layout):
        out_stream.write(f"{line}\n")
    out_stream.flush()
