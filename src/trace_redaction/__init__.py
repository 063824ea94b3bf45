"""
trace-redaction
-----------------------------

Declarative, path-based redaction of structured trace and event records
before they are persisted or exported.
"""
__version__ = "0.1.0"

# Key exports for ease of use
from .config.models import RedactionConfig, RedactionRuleModel
from .core.types import HashFunction, Plugin, RedactionAction
from .log_adapters.abc import LogAdapter as LogAdapterPlugin
from .log_adapters.impl.default_adapter import DefaultLogAdapter
from .observability.types import SpanKind, SpanStatus, TraceEntry, TraceRecord
from .redactors.abc import Redactor as RedactorPlugin
from .redactors.impl.noop_redactor import NoOpRedactorPlugin
from .redactors.impl.path_rule_redactor import PathRuleRedactor, redact_with_path_rules
from .redactors.paths import compile_path
from .redactors.types import REDACTION_PLACEHOLDER_VALUE, PathSegment, RedactionRule

__all__ = [
    "__version__",
    "DefaultLogAdapter",
    "HashFunction",
    "LogAdapterPlugin",
    "NoOpRedactorPlugin",
    "PathRuleRedactor",
    "PathSegment",
    "Plugin",
    "REDACTION_PLACEHOLDER_VALUE",
    "RedactionAction",
    "RedactionConfig",
    "RedactionRule",
    "RedactionRuleModel",
    "RedactorPlugin",
    "SpanKind",
    "SpanStatus",
    "TraceEntry",
    "TraceRecord",
    "compile_path",
    "redact_with_path_rules",
]

import logging

_logger = logging.getLogger(__name__)
if not _logger.hasHandlers():
    _logger.addHandler(logging.NullHandler())
