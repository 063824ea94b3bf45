"""Trace record types."""

from .types import (
    LOG_LEVEL_DEBUG,
    LOG_LEVEL_ERROR,
    LOG_LEVEL_INFO,
    LOG_LEVEL_WARN,
    EntryType,
    RedactableRecord,
    SpanKind,
    SpanStatus,
    TraceEntry,
    TraceRecord,
)

__all__ = [
    "EntryType",
    "LOG_LEVEL_DEBUG",
    "LOG_LEVEL_ERROR",
    "LOG_LEVEL_INFO",
    "LOG_LEVEL_WARN",
    "RedactableRecord",
    "SpanKind",
    "SpanStatus",
    "TraceEntry",
    "TraceRecord",
]
