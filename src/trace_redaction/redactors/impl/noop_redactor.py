"""NoOpRedactorPlugin: A redactor plugin that performs no redaction."""
import copy
import logging
from typing import Any, Dict, Optional

from trace_redaction.observability.types import RedactableRecord
from trace_redaction.redactors.abc import Redactor

logger = logging.getLogger(__name__)

class NoOpRedactorPlugin(Redactor):
    plugin_id: str = "noop_redactor_v1"
    description: str = "A pass-through redactor plugin that performs no actual redaction. Useful for disabling redaction or as a default."

    def redact(self, record: RedactableRecord) -> RedactableRecord:
        """Returns an unmodified deep copy, so callers may mutate the result freely."""
        logger.debug(f"{self.plugin_id}: redact called, returning an untouched copy.")
        return copy.deepcopy(record)

    async def setup(self, config: Optional[Dict[str, Any]] = None) -> None:
        logger.debug(f"{self.plugin_id}: Setup complete (no-op).")

    async def teardown(self) -> None:
        logger.debug(f"{self.plugin_id}: Teardown complete (no-op).")
