"""Capabilities exposed to the host agent runtime."""

from .query import ActionExample, ActionResult, AgentMessage, QueryBlockchainDataAction, message_text, render_result

__all__ = [
    "ActionExample",
    "ActionResult",
    "AgentMessage",
    "QueryBlockchainDataAction",
    "message_text",
    "render_result",
]
