"""Abstract Base Classes/Protocols for LogAdapter Plugins."""
import logging
from typing import Any, Dict, Protocol, runtime_checkable

from trace_redaction.core.types import Plugin

logger = logging.getLogger(__name__)

@runtime_checkable
class LogAdapter(Plugin, Protocol):
    """Protocol for a logging adapter that only ever emits redacted event data."""
    plugin_id: str
    description: str

    async def setup(self, config: Dict[str, Any]) -> None:
        """
        Configures logging handlers and the redactor used for event data.
        Args:
            config: Adapter-specific configuration dictionary. May include a
                    'redactor' instance or 'redaction_rules' to build one.
        """
        pass

    async def process_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """
        Processes a structured event (e.g., a finished span) for logging.
        Data must be redacted by this method before it is written anywhere.
        Args:
            event_type: A string identifying the type of event (e.g., "span_end").
            data: A dictionary containing event-specific data, such as a trace record.
        """
        pass
