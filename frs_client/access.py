"""Async HTTP transport used by the service classes."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import httpx

from frs_client.errors import TransportError

logger = logging.getLogger(__name__)


class FrsAccess:
    """Sends requests to the service endpoint and returns raw responses.

    Status codes are not inspected here; turning a response into a result or
    an error is the job of :func:`frs_client.utils.http_response.response_to_result`.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=endpoint.rstrip("/"),
            timeout=timeout,
            headers=dict(headers or {}),
            transport=transport,
        )

    async def __aenter__(self) -> "FrsAccess":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def _request(
        self,
        method: str,
        uri: str,
        *,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Iterable[tuple[str, tuple[str, bytes, str]]] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        logger.debug("%s %s", method, uri)
        try:
            return await self._client.request(method, uri, json=json, data=data, files=files, headers=headers)
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {uri} failed: {exc!r}") from exc

    async def post(
        self,
        uri: str,
        *,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Iterable[tuple[str, tuple[str, bytes, str]]] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self._request("POST", uri, json=json, data=data, files=files, headers=headers)

    async def get(self, uri: str) -> httpx.Response:
        return await self._request("GET", uri)

    async def delete(self, uri: str) -> httpx.Response:
        return await self._request("DELETE", uri)
