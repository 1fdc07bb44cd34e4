"""
Shared HTTP utilities for API clients.

The helper is a thin asynchronous HTTPX wrapper: it issues exactly one request
per call, logs what was sent and received, and converts transport failures into
:class:`APIError`. Redirects are never followed, whether the client is injected
or built per request. Status codes are left for the caller to interpret so that
error bodies can be surfaced verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping, Optional

import httpx

from ...core.logging import ContextLoggerAdapter, get_logger
from ..base import AdapterError

REDACTED = "[REDACTED]"
_SENSITIVE_HEADERS = {"authorization", "x-api-key"}


class APIError(AdapterError):
    """Raised when an HTTP API call fails before a response is received."""


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` that is safe to log."""

    redacted: dict[str, str] = {}
    for name, value in headers.items():
        if name.lower() not in _SENSITIVE_HEADERS:
            redacted[name] = value
        elif value.lower().startswith("bearer "):
            redacted[name] = f"Bearer {REDACTED}"
        else:
            redacted[name] = REDACTED
    return redacted


def describe_error(exc: BaseException) -> str:
    """Human-readable description that is never empty."""

    text = str(exc).strip()
    return text or exc.__class__.__name__


@dataclass(slots=True)
class BaseAPIClient:
    """
    Base asynchronous HTTP client.

    Parameters
    ----------
    timeout:
        Request timeout in seconds. ``None`` keeps the HTTPX default.
    default_headers:
        Headers automatically attached to every request.
    http_client:
        Optional shared ``httpx.AsyncClient``. When omitted a short-lived client
        is created per request.
    """

    timeout: Optional[float] = None
    default_headers: MutableMapping[str, str] = field(default_factory=dict)
    http_client: Optional[httpx.AsyncClient] = None
    logger: ContextLoggerAdapter = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.logger = get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    def _build_client(self) -> httpx.AsyncClient:
        if self.timeout is None:
            return httpx.AsyncClient()
        return httpx.AsyncClient(timeout=self.timeout)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        json_body: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        merged_headers: dict[str, str] = dict(self.default_headers)
        if headers:
            merged_headers.update(headers)

        self.logger.debug(
            "HTTP request",
            extra={
                "method": method,
                "url": url,
                "headers": redact_headers(merged_headers),
                "payload": dict(json_body) if json_body is not None else None,
            },
        )

        try:
            if self.http_client is not None:
                response = await self.http_client.request(method, url, json=json_body, headers=merged_headers, follow_redirects=False)
            else:
                async with self._build_client() as client:
                    response = await client.request(method, url, json=json_body, headers=merged_headers, follow_redirects=False)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self.logger.error(
                "HTTP error during request",
                extra={"method": method, "url": url, "error": describe_error(exc)},
            )
            raise APIError(f"HTTP error while calling {method} {url}: {describe_error(exc)}") from exc

        self.logger.debug(
            "HTTP response",
            extra={
                "status_code": response.status_code,
                "url": str(response.url),
                "body": response.text,
            },
        )
        return response

    async def _post_json(
        self,
        url: str,
        *,
        json_body: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        return await self._request("POST", url, json_body=json_body, headers=headers)
