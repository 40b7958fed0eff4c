"""Typed models for scan outcomes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class FileResult:
    """Longest line of one successfully opened file."""

    file: str
    length: int
    index: int


@dataclass(slots=True, frozen=True)
class FailureEntry:
    """A file that could not be opened."""

    file: str
    reason: str

    @property
    def message(self) -> str:
        return f"Unable to open file {self.file}: {self.reason}"


@dataclass(slots=True, frozen=True)
class ScanReport:
    """Successes and failures of one run, each in input order."""

    results: tuple[FileResult, ...]
    failures: tuple[FailureEntry, ...]
