"""
Hive Intelligence plugin for conversational agents.

Import :class:`HivePlugin` to register the ``queryBlockchainData`` capability
with a host runtime, or use :class:`HiveQueryClient` directly to send a single
natural-language question to the Hive Intelligence search endpoint.
"""

from .actions import ActionResult, AgentMessage, QueryBlockchainDataAction
from .adapters import AdapterError, VerificationResult
from .adapters.api import HiveQueryClient
from .config import HiveSettings, load_secrets, settings_from_agent_config
from .plugin import HivePlugin
from .results import FailedResult, MockedResult, QueryResult, QueryStatus, SuccessResult

__all__ = [
    "ActionResult",
    "AdapterError",
    "AgentMessage",
    "FailedResult",
    "HivePlugin",
    "HiveQueryClient",
    "HiveSettings",
    "MockedResult",
    "QueryBlockchainDataAction",
    "QueryResult",
    "QueryStatus",
    "SuccessResult",
    "VerificationResult",
    "load_secrets",
    "settings_from_agent_config",
]
