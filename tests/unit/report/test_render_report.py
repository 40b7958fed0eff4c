from __future__ import annotations

import io

from linelength.report import ColumnWidths, format_header, format_row, render_report, write_report
from linelength.scan import FailureEntry, FileResult, ScanReport


def test_header_at_minimum_widths() -> None:
    assert format_header(ColumnWidths(file=4, length=6, index=5)) == "File Length Index"


def test_header_labels_are_left_aligned() -> None:
    header = format_header(ColumnWidths(file=8, length=7, index=6))
    assert header == "File     Length  Index "


def test_row_aligns_name_left_and_numbers_right() -> None:
    row = format_row(FileResult(file="a", length=7, index=0), ColumnWidths(4, 6, 5))
    assert row == "a   " + " " + "     7" + " " + "    0"


def test_render_report_orders_header_rows_then_failures() -> None:
    report = ScanReport(
        results=(
            FileResult(file="notes.txt", length=42, index=7),
            FileResult(file="a.md", length=3, index=12),
        ),
        failures=(FailureEntry(file="gone.txt", reason="No such file or directory"),),
    )

    assert render_report(report) == [
        "File      Length Index",
        "notes.txt     42     7",
        "a.md           3    12",
        "Unable to open file gone.txt: No such file or directory",
    ]


def test_render_report_prints_header_when_every_file_failed() -> None:
    report = ScanReport(
        results=(),
        failures=(FailureEntry(file="x", reason="Permission denied"),),
    )

    assert render_report(report) == [
        "File Length Index",
        "Unable to open file x: Permission denied",
    ]


def test_write_report_terminates_each_line() -> None:
    report = ScanReport(results=(FileResult(file="f", length=1, index=0),), failures=())
    out_stream = io.StringIO()

    write_report(report, out_stream)

    assert out_stream.getvalue() == "File Length Index\nf         1     0\n"
