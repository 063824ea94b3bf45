import json
import logging
from typing import Any, Dict, Optional

from trace_redaction.log_adapters.abc import LogAdapter
from trace_redaction.redactors.abc import Redactor
from trace_redaction.redactors.impl.noop_redactor import NoOpRedactorPlugin
from trace_redaction.redactors.impl.path_rule_redactor import PathRuleRedactor

logger = logging.getLogger(__name__)
DEFAULT_LIBRARY_LOGGER_NAME = "trace_redaction"
REDACTION_FAILED_PLACEHOLDER = "[UNAVAILABLE: redaction failed]"
MAX_LOGGED_DATA_CHARS = 2000

class DefaultLogAdapter(LogAdapter):
    plugin_id: str = "default_log_adapter_v1"
    description: str = "Configures standard Python logging for the library and logs events after redaction."

    _library_logger: Optional[logging.Logger] = None
    _redactor: Optional[Redactor] = None

    async def setup(self, config: Dict[str, Any]) -> None:
        cfg = config or {}
        log_level_str = cfg.get("log_level", "INFO").upper()
        log_level = getattr(logging, log_level_str, logging.INFO)
        library_logger_name = cfg.get("library_logger_name", DEFAULT_LIBRARY_LOGGER_NAME)
        self._library_logger = logging.getLogger(library_logger_name)
        add_console_handler = cfg.get("add_console_handler_if_no_handlers", True)
        has_real_handler = any(not isinstance(h, logging.NullHandler) for h in self._library_logger.handlers)
        if add_console_handler and not has_real_handler:
            console_h = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s - %(name)s - [%(levelname)s] - %(message)s (%(module)s:%(lineno)d)")
            console_h.setFormatter(formatter)
            self._library_logger.addHandler(console_h)
            self._library_logger.propagate = False
            logger.debug(f"Added default console handler to logger '{library_logger_name}'.")
        self._library_logger.setLevel(log_level)
        logger.info(f"{self.plugin_id}: Logging configured for '{library_logger_name}' at level {log_level_str}.")

        redactor_instance = cfg.get("redactor")
        if redactor_instance is not None and isinstance(redactor_instance, Redactor):
            self._redactor = redactor_instance
            logger.info(f"{self.plugin_id}: Using provided Redactor '{self._redactor.plugin_id}'.")
        elif cfg.get("redaction_rules"):
            self._redactor = PathRuleRedactor()
            await self._redactor.setup({
                "rules": cfg["redaction_rules"],
                "hash_function": cfg.get("hash_function", "rolling"),
            })
            logger.info(f"{self.plugin_id}: Using PathRuleRedactor with {len(cfg['redaction_rules'])} rule(s).")
        else:
            if redactor_instance is not None:
                logger.warning(f"{self.plugin_id}: Provided 'redactor' is not a valid Redactor. Falling back to NoOpRedactor.")
            else:
                logger.warning(f"{self.plugin_id}: No redactor or redaction rules configured. Event data will be logged unredacted.")
            self._redactor = NoOpRedactorPlugin()
            await self._redactor.setup()

    async def process_event(self, event_type: str, data: Dict[str, Any]) -> None:
        if not self._library_logger or not self._redactor:
            logger.debug(f"Log adapter not initialized; dropping event '{event_type}'.")
            return
        try:
            redacted_data: Any = self._redactor.redact(data)
            logger.debug(f"Event '{event_type}' data after Redactor '{self._redactor.plugin_id}'.")
        except Exception as e_redact:
            logger.error(f"Error during Redactor '{self._redactor.plugin_id}' for event '{event_type}': {e_redact}", exc_info=True)
            redacted_data = REDACTION_FAILED_PLACEHOLDER
        try:
            log_data_str = json.dumps(redacted_data, sort_keys=True, separators=(",", ":"), default=str)
        except (TypeError, ValueError):
            log_data_str = str(redacted_data)
        if len(log_data_str) > MAX_LOGGED_DATA_CHARS:
            log_data_str = log_data_str[:MAX_LOGGED_DATA_CHARS] + "..."
        self._library_logger.info(f"EVENT: {event_type} | DATA: {log_data_str}")

    async def teardown(self) -> None:
        logger.info(f"{self.plugin_id}: Tearing down.")
        if self._redactor:
            try:
                await self._redactor.teardown()
            except Exception as e_redact_td:
                logger.error(f"Error tearing down redactor '{self._redactor.plugin_id}': {e_redact_td}", exc_info=True)
        self._library_logger = None
        self._redactor = None
