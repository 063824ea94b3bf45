# src/trace_redaction/core/types.py
"""Core shared types and protocols for the redaction plugins."""
import logging
from typing import Any, Dict, Literal, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Shared by the config models and the redactor implementations.
RedactionAction = Literal["mask", "remove", "hash"]
HashFunction = Literal["rolling", "sha256"]

@runtime_checkable
class Plugin(Protocol):
    """Base protocol for all plugins."""
    @property
    def plugin_id(self) -> str:
        """A unique string identifier for this plugin instance/type."""
        ...

    async def setup(self, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Optional asynchronous setup method for plugins.

        This is the mechanism through which a plugin receives its configuration
        when it is not fully configured through its constructor.

        Args:
            config: A dictionary containing the specific configuration for this
                plugin instance.
        """
        pass

    async def teardown(self) -> None:
        """Optional asynchronous teardown method for plugins. Called before application shutdown."""
        pass
