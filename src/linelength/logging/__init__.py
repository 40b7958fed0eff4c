"""Structured logging utilities."""

from .audit import (
    JsonlAuditLogger,
    ScanEvent,
    event_for_failure,
    event_for_result,
    utc_timestamp,
)

__all__ = [
    "JsonlAuditLogger",
    "ScanEvent",
    "event_for_failure",
    "event_for_result",
    "utc_timestamp",
]
