"""Pytest fixtures and global test configuration for trace-redaction."""
from typing import Any, Dict

import pytest
from trace_redaction.observability.types import LOG_LEVEL_INFO, TraceRecord


@pytest.fixture()
def sample_trace() -> TraceRecord:
    """A span with attributes and both kinds of entries, shaped like tracer output."""
    return {
        "id": "trace-1",
        "span_id": "span-1",
        "name": "checkout",
        "kind": "internal",
        "status": "unset",
        "start_time": 1700000000.0,
        "entries": [
            {
                "type": "event",
                "name": "login",
                "timestamp": 1700000000.5,
                "data": {"username": "user123", "password": "secret123"},
            },
            {
                "type": "log",
                "level": LOG_LEVEL_INFO,
                "message": "Test log",
                "timestamp": 1700000001.0,
                "data": {"action": "test", "password": "another-secret"},
            },
        ],
        "attributes": {
            "username": "user123",
            "password": "attr-secret",
            "apiKey": "key-abc-xyz",
            "email": "user@example.com",
        },
    }


@pytest.fixture()
def nested_attributes() -> Dict[str, Any]:
    return {
        "attributes": {
            "user": {"username": "user123", "password": "secret123"},
            "admin": {"username": "admin456", "password": "admin-secret"},
            "config": {"timeout": 5000},
        }
    }
