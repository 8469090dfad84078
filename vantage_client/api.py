"""Alpha Vantage API client.

:class:`ApiClient` holds the API key, the transport and the provider, and
hands out one builder per Alpha Vantage function family::

    async with vantage_client.set_api("demo") as api:
        series = await api.stock_time(StockFunction.DAILY, "IBM").json()
        print(series.entries.latest().close)

The client is never mutated after construction, so one instance can serve
any number of concurrent builders.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TypeVar
from urllib.parse import parse_qs, quote

import httpx

from vantage_client.client import HttpClient, HttpxTransport
from vantage_client.config import ClientSettings, get_settings
from vantage_client.config.settings import DEFAULT_BASE_URL, DEFAULT_RAPID_API_BASE_URL
from vantage_client.core.telemetry import get_tracer
from vantage_client.decoder import ResponseEnvelope, decode_response
from vantage_client.endpoints import (
    CryptoBuilder,
    CryptoFunction,
    CustomBuilder,
    EarningBuilder,
    EconomicIndicatorBuilder,
    ExchangeBuilder,
    ForexBuilder,
    ForexFunction,
    OutputSize,
    QuoteBuilder,
    SearchBuilder,
    SectorBuilder,
    StockFunction,
    TechnicalIndicatorBuilder,
    TechnicalIndicatorInterval,
    TimeSeriesBuilder,
    TimeSeriesInterval,
)
from vantage_client.errors import ConfigurationError

logger = logging.getLogger(__name__)

EnvelopeT = TypeVar("EnvelopeT", bound=ResponseEnvelope)

_APIKEY_QUERY_RE = re.compile(r"(apikey=)([^&\s]+)", re.IGNORECASE)


class Provider(str, Enum):
    """Where requests are sent."""

    ALPHA_VANTAGE = "alpha_vantage"  # www.alphavantage.co, key in the query string
    RAPID_API = "rapid_api"  # RapidAPI proxy, key in x-rapidapi-key header


def _as_transport(client: HttpClient | httpx.AsyncClient | None) -> HttpClient:
    if client is None:
        return HttpxTransport()
    if isinstance(client, httpx.AsyncClient):
        return HttpxTransport(client)
    if isinstance(client, HttpClient):
        return client
    raise TypeError(f"{type(client).__name__} does not implement HttpClient")


class ApiClient:
    """Entry point holding credentials and transport for every builder."""

    __slots__ = ("_api_key", "_client", "_provider", "_base_url", "_rapid_api_url")

    def __init__(
        self,
        api_key: str,
        client: HttpClient | httpx.AsyncClient | None = None,
        provider: Provider = Provider.ALPHA_VANTAGE,
        *,
        base_url: str = DEFAULT_BASE_URL,
        rapid_api_url: str = DEFAULT_RAPID_API_BASE_URL,
    ) -> None:
        self._api_key = api_key
        self._client = _as_transport(client)
        self._provider = Provider(provider)
        self._base_url = base_url
        self._rapid_api_url = rapid_api_url

    @classmethod
    def set_api(cls, api_key: str, client: HttpClient | httpx.AsyncClient | None = None) -> "ApiClient":
        """Client talking to www.alphavantage.co directly."""

        return cls(api_key, client, Provider.ALPHA_VANTAGE)

    @classmethod
    def set_rapid_api(cls, api_key: str, client: HttpClient | httpx.AsyncClient | None = None) -> "ApiClient":
        """Client going through the RapidAPI Alpha Vantage proxy."""

        return cls(api_key, client, Provider.RAPID_API)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def transport(self) -> HttpClient:
        return self._client

    async def get_json(self, path: str, helper: type[EnvelopeT]) -> EnvelopeT:
        """Fetch ``path`` (``?function=...``) and decode the body into ``helper``.

        Sentinel checks are left to ``helper.convert()``.
        """

        function = parse_qs(path.lstrip("?")).get("function", ["?"])[0]
        attributes = {"alpha_vantage.function": function, "alpha_vantage.provider": self._provider.value}
        with get_tracer().start_as_current_span("alpha_vantage.request", attributes=attributes):
            if self._provider is Provider.ALPHA_VANTAGE:
                url = f"{self._base_url}{path}&apikey={quote(self._api_key)}"
                logger.debug("GET %s", _APIKEY_QUERY_RE.sub(r"\1[REDACTED]", url))
                text = await self._client.get_alpha_vantage_provider_output(url)
            else:
                url = f"{self._rapid_api_url}{path}"
                logger.debug("GET %s via RapidAPI", url)
                text = await self._client.get_rapid_api_provider_output(url, self._api_key)
            return decode_response(text, helper)

    async def aclose(self) -> None:
        close = getattr(self._client, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def crypto(self, function: CryptoFunction, symbol: str, market: str) -> CryptoBuilder:
        """Digital currency series, e.g. ``api.crypto(CryptoFunction.DAILY, "BTC", "EUR")``."""

        return CryptoBuilder(self, function, symbol, market)

    def custom(self, function: str) -> CustomBuilder:
        """Any function without a dedicated builder, e.g. ``api.custom("OVERVIEW").param("symbol", "IBM")``."""

        return CustomBuilder(self, function)

    def earning(self, symbol: str) -> EarningBuilder:
        return EarningBuilder(self, symbol)

    def economic_indicator(self, function: str) -> EconomicIndicatorBuilder:
        """Economic series such as ``REAL_GDP_PER_CAPITA`` or ``TREASURY_YIELD``."""

        return EconomicIndicatorBuilder(self, function)

    def exchange(self, from_currency: str, to_currency: str) -> ExchangeBuilder:
        return ExchangeBuilder(self, from_currency, to_currency)

    def forex(self, function: ForexFunction, from_symbol: str, to_symbol: str) -> ForexBuilder:
        return ForexBuilder(self, function, from_symbol, to_symbol)

    def quote(self, symbol: str) -> QuoteBuilder:
        return QuoteBuilder(self, symbol)

    def search(self, keywords: str) -> SearchBuilder:
        return SearchBuilder(self, keywords)

    def sector(self) -> SectorBuilder:
        return SectorBuilder(self)

    def stock_time(self, function: StockFunction, symbol: str) -> TimeSeriesBuilder:
        return TimeSeriesBuilder(self, function, symbol)

    def technical_indicator(
        self,
        function: str,
        symbol: str,
        interval: TechnicalIndicatorInterval,
    ) -> TechnicalIndicatorBuilder:
        """Indicator by name, e.g. ``api.technical_indicator("SMA", "IBM", TechnicalIndicatorInterval.DAILY)``."""

        return TechnicalIndicatorBuilder(self, function, symbol, interval)

    def __repr__(self) -> str:
        return f"ApiClient(provider={self._provider.value!r}, transport={type(self._client).__name__})"


def get_api_client(settings: ClientSettings | None = None, client: HttpClient | None = None) -> ApiClient:
    """Build an :class:`ApiClient` from environment settings."""

    settings = settings or get_settings()
    if not settings.alphavantage_api_key:
        raise ConfigurationError("ALPHAVANTAGE_API_KEY is not configured")
    logger.debug("Building Alpha Vantage client from settings: %s", settings.dict_for_logging())
    return ApiClient(
        settings.alphavantage_api_key,
        client or HttpxTransport(settings=settings),
        Provider(settings.alphavantage_provider),
        base_url=settings.alphavantage_base_url,
        rapid_api_url=settings.rapidapi_base_url,
    )


__all__ = [
    "ApiClient",
    "OutputSize",
    "Provider",
    "TimeSeriesInterval",
    "get_api_client",
]
