from __future__ import annotations

import json
from typing import Any, Callable
from urllib.parse import parse_qs

import httpx
import pytest

from stopforumspam.config import get_settings


class RecordingTransport(httpx.MockTransport):
    """Mock transport answering every request with one canned response."""

    def __init__(self, status_code: int = 200, body: Any = None, error: Exception | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._body = body
        self._error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if isinstance(self._body, (dict, list)):
            return httpx.Response(self._status_code, json=self._body)
        return httpx.Response(self._status_code, text=self._body or "")

    def form(self, index: int = -1) -> dict[str, str]:
        parsed = parse_qs(self.requests[index].content.decode("utf-8"), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for key in ("SFS_API_KEY", "SFS_LOG_LEVEL", "SFS_LOG_JSON"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def make_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture()
def spammer_body() -> dict[str, Any]:
    return json.loads(
        '{"success": 1, "username": {"lastseen": "2015-03-09 15:22:49",'
        ' "frequency": 3830, "appears": 1, "confidence": 90.2}}'
    )
