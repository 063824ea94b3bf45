"""Implementations of LogAdapter."""
from .default_adapter import DefaultLogAdapter

__all__ = ["DefaultLogAdapter"]
