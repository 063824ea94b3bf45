# src/trace_redaction/redactors/impl/__init__.py
"""Implementations of Redactor."""
from .noop_redactor import NoOpRedactorPlugin
from .path_rule_redactor import PathRuleRedactor, redact_with_path_rules

__all__ = ["NoOpRedactorPlugin", "PathRuleRedactor", "redact_with_path_rules"]
