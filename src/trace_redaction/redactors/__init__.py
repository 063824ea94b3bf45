"""Redactor Abstractions and Implementations."""

from .abc import Redactor
from .hashing import rolling_hash, sha256_hash
from .impl import (
    NoOpRedactorPlugin,
    PathRuleRedactor,
    redact_with_path_rules,
)
from .paths import compile_path
from .types import REDACTION_PLACEHOLDER_VALUE, PathSegment, RedactionRule

__all__ = [
    "Redactor",
    "NoOpRedactorPlugin",
    "PathRuleRedactor",
    "PathSegment",
    "REDACTION_PLACEHOLDER_VALUE",
    "RedactionRule",
    "compile_path",
    "redact_with_path_rules",
    "rolling_hash",
    "sha256_hash",
]
