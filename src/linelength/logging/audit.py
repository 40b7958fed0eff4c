"""Structured JSONL audit log of scan outcomes."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linelength.scan.models import FailureEntry, FileResult


@dataclass(slots=True, frozen=True)
class ScanEvent:
    """Outcome of scanning a single file."""

    timestamp: str
    file: str
    ok: bool
    length: int | None
    index: int | None
    error: str | None


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def event_for_result(result: FileResult) -> ScanEvent:
    return ScanEvent(
        timestamp=utc_timestamp(),
        file=result.file,
        ok=True,
        length=result.length,
        index=result.index,
        error=None,
    )


def event_for_failure(failure: FailureEntry) -> ScanEvent:
    return ScanEvent(
        timestamp=utc_timestamp(),
        file=failure.file,
        ok=False,
        length=None,
        index=None,
        error=failure.reason,
    )


class JsonlAuditLogger:
    """Append-only JSONL audit logger and bounded reader."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def append(self, event: ScanEvent) -> None:
        """Append an event as one JSON object per line."""
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(event), sort_keys=True))
            handle.write("\n")
