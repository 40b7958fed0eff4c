"""Longest-line scanning package."""

from .models import FailureEntry, FileResult, ScanReport
from .scanner import LineReadError, iter_line_lengths, longest_line, scan_file, scan_files

__all__ = [
    "FailureEntry",
    "FileResult",
    "LineReadError",
    "ScanReport",
    "iter_line_lengths",
    "longest_line",
    "scan_file",
    "scan_files",
]
