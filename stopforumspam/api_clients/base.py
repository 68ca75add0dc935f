"""Shared HTTP plumbing for the StopForumSpam endpoints."""
from __future__ import annotations

from typing import Any

import httpx

from ..errors import ParseError, RemoteError, TransportError
from ..logging_config import logger


class ForumSpamClient:
    name: str
    base_url: str

    def __init__(self, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    async def _post(self, form: dict[str, str]) -> httpx.Response:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.base_url, data=form, headers=self._headers())
        except httpx.RequestError as exc:
            logger.warning("sfs.transport_error", client=self.name, error=str(exc))
            raise TransportError(exc) from exc
        if response.status_code != 200:
            logger.warning("sfs.remote_error", client=self.name, status_code=response.status_code)
            raise RemoteError(response.status_code, response.text)
        return response

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(response.text) from exc

    def _headers(self) -> dict[str, str]:
        return {}
