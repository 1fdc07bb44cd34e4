"""
Agent-facing capability for querying Hive Intelligence.

:class:`QueryBlockchainDataAction` is what the host agent runtime routes
messages to. It gates messages with :meth:`~QueryBlockchainDataAction.validate`,
forwards the text to its :class:`HiveQueryClient` and renders the normalised
result as a single string. Nothing raised below this layer reaches the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..adapters.api.hive import HiveQueryClient
from ..core.logging import get_logger
from ..results import QueryResult, QueryStatus

LOGGER = get_logger(__name__)

PROVIDER_UNAVAILABLE = "Hive Intelligence provider not available. Please check agent configuration."
NO_RESULT_FALLBACK = "Hive Intelligence query completed, but no specific result was returned."


@dataclass(slots=True)
class AgentMessage:
    """Minimal message shape delivered by the host runtime."""

    text: Optional[str]
    user_id: Optional[str] = None
    agent_id: Optional[str] = None
    room_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Either a ``response`` for the conversation or an ``error`` for the host."""

    response: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.response is None) == (self.error is None):
            raise ValueError("ActionResult requires exactly one of 'response' or 'error'.")

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> Dict[str, str]:
        if self.error is not None:
            return {"error": self.error}
        return {"response": self.response or ""}


@dataclass(frozen=True, slots=True)
class ActionExample:
    user: str
    text: str


def message_text(message: Any) -> Optional[str]:
    """
    Extract the text of a host message.

    Accepts objects exposing ``text``, plain mappings with a ``text`` key and
    host-shaped mappings nesting it under ``content``.
    """

    if message is None:
        return None
    if isinstance(message, Mapping):
        text = message.get("text")
        content = message.get("content")
    else:
        text = getattr(message, "text", None)
        content = getattr(message, "content", None)
    if text is None and content is not None:
        text = content.get("text") if isinstance(content, Mapping) else getattr(content, "text", None)
    return text if isinstance(text, str) else None


def render_result(result: QueryResult) -> str:
    """Turn a query result into the text shown in the conversation."""

    status = getattr(result, "status", None)
    if status is QueryStatus.MOCKED:
        return result.explanatory_text
    if status is QueryStatus.ERROR:
        return f"Error from Hive Intelligence: {result.error_message}"
    if status is QueryStatus.SUCCESS:
        if not result.result_text:
            return NO_RESULT_FALLBACK
        text = f"Hive Intelligence found: {result.result_text}"
        if result.data_sources:
            text += "\n\nSources: " + ", ".join(result.data_sources)
        return text
    raise TypeError(f"Unsupported query result type: {type(result).__name__}")


class QueryBlockchainDataAction:
    """Forward a user question to Hive Intelligence and answer with its result."""

    name = "queryBlockchainData"
    description = (
        "Queries blockchain or market data using Hive Intelligence. "
        "Provide a clear and concise question about the data you need."
    )
    similes: Tuple[str, ...] = (
        "search blockchain data",
        "get crypto price",
        "analyze market data",
        "find blockchain information",
        "query hive intelligence",
    )
    examples: Tuple[Tuple[ActionExample, ...], ...] = (
        (
            ActionExample("user", "What is the current price of Ethereum?"),
            ActionExample("agent", 'queryBlockchainData(message: "What is the current price of Ethereum?")'),
        ),
        (
            ActionExample("user", "Tell me about the latest trends in DeFi."),
            ActionExample("agent", 'queryBlockchainData(message: "Latest trends in DeFi")'),
        ),
        (
            ActionExample("user", "What are the top 5 cryptocurrencies by market cap?"),
            ActionExample("agent", 'queryBlockchainData(message: "Top 5 cryptocurrencies by market cap")'),
        ),
    )

    def __init__(self, client: Optional[HiveQueryClient] = None) -> None:
        self.client = client

    def bind(self, client: HiveQueryClient) -> HiveQueryClient:
        """Attach ``client`` unless one is already bound; return the bound client."""

        if self.client is None:
            self.client = client
        return self.client

    def validate(self, message: Any) -> bool:
        text = message_text(message)
        return bool(text and text.strip())

    async def handle(self, message: Any) -> ActionResult:
        if self.client is None:
            LOGGER.error("Hive Intelligence client not initialised", extra={"action": self.name})
            return ActionResult(error=PROVIDER_UNAVAILABLE)

        try:
            result = await self.client.query(message_text(message) or "")
            return ActionResult(response=render_result(result))
        except Exception as exc:
            LOGGER.exception("Error while handling Hive Intelligence query", extra={"action": self.name})
            return ActionResult(error=f"Failed to process Hive Intelligence query: {exc}")


__all__ = [
    "ActionExample",
    "ActionResult",
    "AgentMessage",
    "NO_RESULT_FALLBACK",
    "PROVIDER_UNAVAILABLE",
    "QueryBlockchainDataAction",
    "message_text",
    "render_result",
]
