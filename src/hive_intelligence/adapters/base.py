"""
Shared adapter types.

Clients raise :class:`AdapterError` subclasses internally and readiness checks
report a :class:`VerificationResult`. During queries neither reaches the host
agent, because the action layer converts failures into text. Only a strict
plugin initialisation lets :class:`AdapterError` escape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


class AdapterError(RuntimeError):
    """Raised when an adapter encounters a non-recoverable error."""


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """
    Readiness report for a remote service.

    Attributes
    ----------
    success:
        ``True`` when queries will reach the live endpoint.
    mode:
        ``"live"``, ``"mocked"`` or ``"uninitialised"``.
    message:
        Human-readable summary, safe to show to an operator.
    details:
        Extra metadata such as the configured endpoint.
    """

    success: bool
    mode: str
    message: str
    details: Mapping[str, object] = field(default_factory=dict)
