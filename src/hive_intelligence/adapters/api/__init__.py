"""
HTTP API clients.

Each client wraps a single HTTP call, normalises its outcome and can report
its readiness through ``verify()`` without touching the network.
"""

from .base import APIError, BaseAPIClient, redact_headers
from .hive import MOCKED_EXPLANATION, HiveQueryClient

__all__ = [
    "APIError",
    "BaseAPIClient",
    "HiveQueryClient",
    "MOCKED_EXPLANATION",
    "redact_headers",
]
