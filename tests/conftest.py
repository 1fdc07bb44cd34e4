from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from hive_intelligence.config import HiveSettings

TEST_ENDPOINT = "https://hive.example.com/v1/search"
TEST_API_KEY = "hive-test-key-0123456789"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def live_settings() -> HiveSettings:
    return HiveSettings(api_key=TEST_API_KEY, endpoint=TEST_ENDPOINT)


@pytest.fixture
def mocked_settings(monkeypatch) -> HiveSettings:
    monkeypatch.delenv("HIVE_API_KEY", raising=False)
    return HiveSettings(api_key=None, endpoint=TEST_ENDPOINT)


@pytest.fixture
def make_transport():
    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> RecordingTransport:
        return RecordingTransport(handler)

    return _factory
