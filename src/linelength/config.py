"""Scan and table layout defaults."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_ENCODING = "utf-8"

FILE_HEADER = "File"
LENGTH_HEADER = "Length"
INDEX_HEADER = "Index"


@dataclass(slots=True, frozen=True)
class TableLayout:
    """Minimum column widths, sized so headers are never truncated."""

    min_file_width: int = len(FILE_HEADER)
    min_length_width: int = len(LENGTH_HEADER)
    min_index_width: int = len(INDEX_HEADER)


@dataclass(slots=True, frozen=True)
class ScanConfig:
    """Settings for one scan run."""

    encoding: str = DEFAULT_ENCODING
    layout: TableLayout = field(default_factory=TableLayout)


def default_config() -> ScanConfig:
    """Build the only configuration the CLI uses."""
    return ScanConfig(encoding=DEFAULT_ENCODING, layout=TableLayout())
