"""
Hive Intelligence search client and adapter.

The client targets the ``/v1/search`` endpoint, which answers a natural-language
prompt about blockchain and market data. Every outcome is normalised into one of
the :mod:`hive_intelligence.results` types so callers never handle HTTPX
exceptions or raw payloads directly.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, MutableMapping, Optional, Tuple

import httpx

from ...config import HiveSettings
from ...results import FailedResult, MockedResult, QueryResult, SuccessResult
from ..base import VerificationResult
from .base import APIError, BaseAPIClient

MOCKED_EXPLANATION = (
    "Mocked data: Hive Intelligence data cannot be fetched without an API key and network access. "
    "Please provide a valid API key and ensure network access."
)
_SOURCE_ID_KEYS = ("id", "name", "url", "title")

def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (Mapping, list)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)

def _extract_error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    else:
        if isinstance(data, Mapping):
            error = data.get("error")
            if isinstance(error, Mapping):
                error = error.get("message")
            for candidate in (error, data.get("message"), data.get("detail")):
                if isinstance(candidate, str) and candidate.strip():
                    return candidate
        if data is not None:
            return _to_text(data)

    raw = response.text.strip()
    return raw or response.reason_phrase or "empty response body"

def _extract_result_text(data: Any) -> str:
    if isinstance(data, str):
        return data
    if not isinstance(data, Mapping):
        return ""
    return _to_text(data.get("result"))

def _extract_data_sources(data: Any) -> Tuple[str, ...]:
    if not isinstance(data, Mapping):
        return ()
    raw_sources = data.get("data_sources")
    if not isinstance(raw_sources, list):
        return ()

    sources = []
    for item in raw_sources:
        if isinstance(item, Mapping):
            identifier = next((item[key] for key in _SOURCE_ID_KEYS if isinstance(item.get(key), str) and item[key]), None)
            text = identifier or _to_text(item)
        else:
            text = _to_text(item).strip()
        if text:
            sources.append(text)
    return tuple(sources)

class HiveQueryClient(BaseAPIClient):
    """Issue one search request per prompt and normalise the outcome."""

    def __init__(
        self,
        settings: Optional[HiveSettings] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        resolved = settings or HiveSettings()
        headers: MutableMapping[str, str] = {
            "Content-Type": "application/json",
            "User-Agent": resolved.user_agent,
        }
        if resolved.api_key:
            headers["Authorization"] = f"Bearer {resolved.api_key}"
        super().__init__(timeout=resolved.timeout, default_headers=headers, http_client=http_client)
        self.settings = resolved

    def build_payload(self, prompt: str) -> Mapping[str, Any]:
        return {
            "prompt": prompt,
            "temperature": self.settings.temperature,
            "include_data_sources": self.settings.include_data_sources,
        }

    async def query(self, prompt: str) -> QueryResult:
        """
        Send ``prompt`` to the search endpoint.

        Without a credential no request is made and a :class:`MockedResult` is
        returned. Transport errors, non-2xx statuses and undecodable bodies all
        become :class:`FailedResult`; this method does not raise.
        """

        if not self.settings.has_credential:
            self.logger.warning("Hive Intelligence API key not provided; returning mocked data", extra={"mode": "mocked"})
            return MockedResult(query=prompt, explanatory_text=MOCKED_EXPLANATION)

        endpoint = self.settings.endpoint
        self.logger.info("Querying Hive Intelligence", extra={"mode": "live", "url": endpoint})
        try:
            response = await self._post_json(endpoint, json_body=self.build_payload(prompt))
        except APIError as exc:
            return FailedResult(query=prompt, error_message=f"Failed to fetch data from Hive Intelligence: {exc}")

        if not response.is_success:
            detail = _extract_error_detail(response)
            self.logger.warning(
                "Hive Intelligence rejected the request",
                extra={"status_code": response.status_code, "error": detail},
            )
            return FailedResult(
                query=prompt,
                error_message=f"Hive Intelligence request failed with status {response.status_code}: {detail}",
            )

        try:
            data = response.json()
        except ValueError:
            self.logger.error("Hive Intelligence returned invalid JSON", extra={"status_code": response.status_code})
            return FailedResult(
                query=prompt,
                error_message=f"Hive Intelligence returned invalid JSON with status {response.status_code}.",
            )

        result = SuccessResult(
            query=prompt,
            result_text=_extract_result_text(data),
            data_sources=_extract_data_sources(data),
        )
        if not result.result_text:
            self.logger.info("Hive Intelligence response carried no result text", extra={"status_code": response.status_code})
        return result

    def verify(self) -> VerificationResult:
        """Report whether :meth:`query` will call the live endpoint, without sending a request."""

        details = {"endpoint": self.settings.endpoint}
        if not self.settings.has_credential:
            return VerificationResult(
                success=False,
                mode="mocked",
                message=(
                    "Hive Intelligence API key is not configured; queries will return mocked data. "
                    "Set settings.secrets.HIVE_API_KEY in the agent configuration or [hive].api_key in .secrets/secret.toml."
                ),
                details=details,
            )
        return VerificationResult(
            success=True,
            mode="live",
            message="Hive Intelligence credentials detected; queries will call the live endpoint.",
            details=details,
        )


__all__ = ["HiveQueryClient", "MOCKED_EXPLANATION"]
