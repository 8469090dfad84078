"""HTTP transports used by :class:`vantage_client.api.ApiClient`.

Any object implementing :class:`HttpClient` can be handed to the API client;
:class:`HttpxTransport` is the bundled implementation on top of
``httpx.AsyncClient``. Transports only fetch text: decoding and error
sentinels are handled by the API client.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx

from vantage_client.config import ClientSettings
from vantage_client.config.settings import DEFAULT_TIMEOUT_SECONDS
from vantage_client.errors import RequestFailedError

logger = logging.getLogger(__name__)

RAPID_API_HOST = "alpha-vantage.p.rapidapi.com"


@runtime_checkable
class HttpClient(Protocol):
    """Contract for fetching raw Alpha Vantage responses."""

    async def get_alpha_vantage_provider_output(self, url: str) -> str:
        """GET ``url`` (which already carries the ``apikey`` parameter) and return the body."""

        ...

    async def get_rapid_api_provider_output(self, url: str, api_key: str) -> str:
        """GET ``url`` through RapidAPI, passing ``api_key`` as ``x-rapidapi-key``."""

        ...


def build_async_client(settings: ClientSettings | None = None) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` used when no client is injected.

    Without ``settings`` the fixed default timeout applies; the environment is
    only consulted by :func:`vantage_client.get_api_client`.
    """

    timeout = settings.http_timeout_seconds if settings is not None else DEFAULT_TIMEOUT_SECONDS
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers={"Accept": "application/json"},
    )


class HttpxTransport:
    """:class:`HttpClient` backed by ``httpx.AsyncClient``.

    An injected client is left open; a client built here is closed by
    :meth:`aclose` or when leaving ``async with``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: ClientSettings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or build_async_client(settings)

    async def get_alpha_vantage_provider_output(self, url: str) -> str:
        return await self._get_text(url)

    async def get_rapid_api_provider_output(self, url: str, api_key: str) -> str:
        headers = {
            "x-rapidapi-host": RAPID_API_HOST,
            "x-rapidapi-key": api_key,
        }
        return await self._get_text(url, headers=headers)

    async def _get_text(self, url: str, headers: dict[str, str] | None = None) -> str:
        try:
            response = await self._client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            raise RequestFailedError(f"GET request failed: {type(exc).__name__}") from exc

        if response.status_code >= 400:
            raise RequestFailedError(f"GET request failed with status {response.status_code}")
        return response.text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["HttpClient", "HttpxTransport", "RAPID_API_HOST", "build_async_client"]
