"""Abstract Base Classes/Protocols for Redactor Plugins."""
import copy
import logging
from typing import Protocol, runtime_checkable

from trace_redaction.core.types import Plugin
from trace_redaction.observability.types import RedactableRecord

logger = logging.getLogger(__name__)

@runtime_checkable
class Redactor(Plugin, Protocol):
    """Protocol for a trace record redaction plugin."""
    # plugin_id: str (from Plugin protocol)
    description: str # Human-readable description of this redactor

    def redact(self, record: RedactableRecord) -> RedactableRecord:
        """
        Returns a redacted copy of a trace record.
        This method is synchronous as redaction is CPU-bound and must never raise
        for records that do not match the redactor's rules.
        Args:
            record: The record to redact (nested dicts and lists of plain data).
                    It is never mutated.
        Returns:
            A structurally independent copy with sensitive values masked, removed or hashed.
        """
        logger.warning(f"Redactor '{self.plugin_id}' redact method not fully implemented. Returning an unredacted copy.")
        return copy.deepcopy(record)
