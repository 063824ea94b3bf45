"""Types for the trace records that redactors operate on."""
from typing import Any, Dict, List, Literal, Optional, TypedDict, Union

SpanKind = Literal["internal", "server", "client", "producer", "consumer"]
SpanStatus = Literal["unset", "ok", "error"]
EntryType = Literal["event", "log"]

# Numeric severities carried by "log" entries.
LOG_LEVEL_DEBUG = 0
LOG_LEVEL_INFO = 1
LOG_LEVEL_WARN = 2
LOG_LEVEL_ERROR = 3


class TraceEntry(TypedDict, total=False):
    """A timestamped event or log line recorded within a span."""
    type: EntryType
    name: str # Set for "event" entries
    level: int # Set for "log" entries, one of the LOG_LEVEL_* constants
    message: str # Set for "log" entries
    timestamp: float
    data: Dict[str, Any]


class TraceRecord(TypedDict, total=False):
    """
    A single span as produced by a tracer. Redactors treat it as opaque nested
    data; the keys below only describe the usual shape.
    """
    id: str
    span_id: str
    parent_span_id: Optional[str]
    name: str
    kind: SpanKind
    status: SpanStatus
    start_time: float
    end_time: Optional[float]
    entries: List[TraceEntry]
    attributes: Dict[str, Any]


# Anything a redactor can be handed: a typed trace record or arbitrary JSON-like data.
RedactableRecord = Union[TraceRecord, Dict[str, Any], List[Any]]
