"""
Plugin entry point registered with the host agent runtime.

The host reads :attr:`HivePlugin.name`, :attr:`HivePlugin.description` and
:attr:`HivePlugin.actions` for routing, then calls :meth:`HivePlugin.initialize`
once during agent setup. Initialisation creates the single
:class:`HiveQueryClient` shared by every action invocation.
"""

from __future__ import annotations

from typing import Any, List, Optional

import httpx

from .actions.query import PROVIDER_UNAVAILABLE, QueryBlockchainDataAction
from .adapters import AdapterError, VerificationResult
from .adapters.api.hive import HiveQueryClient
from .config import HiveSettings, settings_from_agent_config
from .core.logging import get_logger

LOGGER = get_logger(__name__)


class HivePlugin:
    """Integrates the Hive Intelligence search API into an agent."""

    name = "hive"
    description = "A plugin for integrating with Hive Intelligence API to query blockchain and market data."

    def __init__(self) -> None:
        self.client: Optional[HiveQueryClient] = None
        self.query_action = QueryBlockchainDataAction()
        self.actions: List[QueryBlockchainDataAction] = [self.query_action]

    @property
    def initialized(self) -> bool:
        return self.client is not None

    def initialize(
        self,
        settings: Optional[HiveSettings] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        strict: bool = False,
    ) -> HiveQueryClient:
        """
        Create the shared client from ``settings``.

        A missing credential is logged and the plugin continues in mocked mode,
        unless ``strict`` is set, in which case :class:`AdapterError` is raised and
        no client is created. Subsequent calls keep the existing client and ignore
        their arguments.
        """

        if self.client is not None:
            LOGGER.debug("Hive plugin already initialised; keeping existing client")
            return self.client

        client = HiveQueryClient(settings or HiveSettings(), http_client=http_client)
        readiness = client.verify()
        if not readiness.success:
            if strict:
                LOGGER.error("Hive plugin initialisation refused", extra={"mode": readiness.mode})
                raise AdapterError(readiness.message)
            LOGGER.warning(
                "HIVE_API_KEY not found in agent secrets. Hive Intelligence plugin will operate in mocked mode.",
                extra={"mode": readiness.mode},
            )
        self.client = client
        self.query_action.bind(client)
        LOGGER.info("Hive plugin initialised", extra={"mode": readiness.mode, "url": client.settings.endpoint})
        return client

    def initialize_from_agent_config(
        self,
        agent_config: Any,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        strict: bool = False,
    ) -> HiveQueryClient:
        """Initialise from a host configuration holding ``settings.secrets.HIVE_API_KEY``."""

        return self.initialize(settings_from_agent_config(agent_config), http_client=http_client, strict=strict)

    def verify(self) -> VerificationResult:
        """Report whether the plugin is initialised and will answer from the live endpoint."""

        if self.client is None:
            return VerificationResult(success=False, mode="uninitialised", message=PROVIDER_UNAVAILABLE)
        return self.client.verify()


__all__ = ["HivePlugin"]
