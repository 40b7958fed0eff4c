"""Single-pass longest-line scanning."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import BinaryIO

from linelength.config import ScanConfig, default_config
from linelength.logging import JsonlAuditLogger, event_for_failure, event_for_result
from linelength.scan.models import FailureEntry, FileResult, ScanReport


class LineReadError(Exception):
    """Raised when an opened file has a line that cannot be read or decoded."""

    def __init__(self, file: str, line_index: int, reason: str) -> None:
        super().__init__(f"Unable to read file {file} at line {line_index}: {reason}")
        self.file = file
        self.line_index = line_index
        self.reason = reason


def longest_line(lengths: Iterable[int]) -> tuple[int, int]:
    """Fold line lengths into (max length, index); ties move to the later line."""
    best_length, best_index = 0, 0
    for index, length in enumerate(lengths):
        if length < best_length:
            continue
        best_length, best_index = length, index
    return best_length, best_index


def iter_line_lengths(handle: BinaryIO, file: str, encoding: str) -> Iterator[int]:
    """Yield the byte length of each line, excluding its terminator."""
    index = 0
    while True:
        try:
            raw = handle.readline()
        except OSError as exc:
            raise LineReadError(file, index, exc.strerror or str(exc)) from exc
        if not raw:
            return
        if raw.endswith(b"\r\n"):
            raw = raw[:-2]
        elif raw.endswith(b"\n"):
            raw = raw[:-1]
        try:
            raw.decode(encoding)
        except UnicodeDecodeError as exc:
            raise LineReadError(file, index, str(exc)) from exc
        yield len(raw)
        index += 1


def scan_file(file: str, config: ScanConfig | None = None) -> FileResult:
    """Scan one file.

    Raises ``OSError`` when the file cannot be opened and ``LineReadError``
    when an opened file cannot be read to the end. A directory is unreadable
    rather than unopenable, so it raises ``LineReadError``.
    """
    effective = config or default_config()
    try:
        handle = Path(file).open("rb")
    except IsADirectoryError as exc:
        raise LineReadError(file, 0, exc.strerror or str(exc)) from exc
    with handle:
        length, index = longest_line(iter_line_lengths(handle, file, effective.encoding))
    return FileResult(file=file, length=length, index=index)


def scan_files(
    files: Sequence[str],
    config: ScanConfig | None = None,
    audit_logger: JsonlAuditLogger | None = None,
) -> ScanReport:
    """Scan files in order, collecting open failures instead of stopping.

    ``LineReadError`` is not collected: it propagates to the caller.
    """
    effective = config or default_config()
    results: list[FileResult] = []
    failures: list[FailureEntry] = []
    for file in files:
        try:
            result = scan_file(file, effective)
        except OSError as exc:
            failure = FailureEntry(file=file, reason=exc.strerror or str(exc))
            failures.append(failure)
            if audit_logger is not None:
                audit_logger.append(event_for_failure(failure))
            continue
        results.append(result)
        if audit_logger is not None:
            audit_logger.append(event_for_result(result))
    return ScanReport(results=tuple(results), failures=tuple(failures))
