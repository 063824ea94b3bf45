"""Core shared types."""
from .types import HashFunction, Plugin, RedactionAction

__all__ = ["HashFunction", "Plugin", "RedactionAction"]
