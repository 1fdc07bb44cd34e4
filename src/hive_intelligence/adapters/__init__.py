"""
Adapters for remote services.

Concrete clients live in :mod:`hive_intelligence.adapters.api`; this package
holds the error and readiness types they share.
"""

from .base import AdapterError, VerificationResult

__all__ = ["AdapterError", "VerificationResult"]
