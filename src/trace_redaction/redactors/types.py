"""Types for Redactor components."""
from typing import Literal, NamedTuple, Optional, Sequence, TypedDict

from trace_redaction.core.types import RedactionAction

SegmentKind = Literal["literal", "wildcard"]

REDACTION_PLACEHOLDER_VALUE = "[REDACTED]"
WILDCARD_TOKEN = "*"
ARRAY_SUFFIX = "[]"


class _RedactionRuleRequired(TypedDict):
    paths: Sequence[str]
    action: RedactionAction


class RedactionRule(_RedactionRuleRequired, total=False):
    """A declarative rule: which dotted paths to redact and how."""
    replacement: Optional[str] # Only used by "mask"; defaults to REDACTION_PLACEHOLDER_VALUE


class PathSegment(NamedTuple):
    """One compiled step of a dotted path."""
    kind: SegmentKind
    key: str = ""

    @property
    def is_wildcard(self) -> bool:
        return self.kind == "wildcard"
