"""ApiClient construction, URL composition and settings wiring."""

from __future__ import annotations

import httpx
import pytest

import vantage_client
from conftest import StubTransport, load_payload
from vantage_client import ApiClient, HttpxTransport, Provider, get_api_client
from vantage_client.config import ClientSettings
from vantage_client.errors import ConfigurationError, RateLimitedError

QUOTE = load_payload("global_quote.json")


def test_set_api_exposes_key_and_provider():
    api = vantage_client.set_api("demo", StubTransport("{}"))
    assert api.api_key == "demo"
    assert api.provider is Provider.ALPHA_VANTAGE


def test_set_rapid_api_selects_rapid_provider():
    api = vantage_client.set_rapid_api("demo", StubTransport("{}"))
    assert api.provider is Provider.RAPID_API


def test_client_is_immutable():
    api = ApiClient.set_api("demo", StubTransport("{}"))
    with pytest.raises(AttributeError):
        api.api_key = "other"
    with pytest.raises(AttributeError):
        api.extra = 1


def test_async_client_is_wrapped_in_transport():
    api = ApiClient.set_api("demo", httpx.AsyncClient())
    assert isinstance(api.transport, HttpxTransport)


def test_unsupported_client_is_rejected():
    with pytest.raises(TypeError):
        ApiClient.set_api("demo", object())


@pytest.mark.asyncio
async def test_direct_url_appends_api_key(make_api):
    api = make_api(QUOTE)
    await api.quote("IBM").json()
    call = api.transport.calls[0]
    assert call["url"] == "https://www.alphavantage.co/query?function=GLOBAL_QUOTE&symbol=IBM&apikey=test"
    assert call["api_key"] is None


@pytest.mark.asyncio
async def test_rapid_url_passes_key_separately(make_api):
    api = make_api(QUOTE, rapid=True)
    await api.quote("IBM").json()
    call = api.transport.calls[0]
    assert call["url"] == "https://alpha-vantage.p.rapidapi.com/query?function=GLOBAL_QUOTE&symbol=IBM"
    assert call["api_key"] == "test"


@pytest.mark.asyncio
async def test_keywords_are_url_encoded(make_api):
    api = make_api({"bestMatches": []})
    await api.search("tesla motors").json()
    assert "keywords=tesla%20motors" in api.transport.calls[0]["url"]


@pytest.mark.asyncio
async def test_end_to_end_through_httpx_mock():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["function"] == "TIME_SERIES_DAILY"
        return httpx.Response(200, json=load_payload("daily.json"))

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with ApiClient.set_api("demo", client) as api:
        series = await api.stock_time(vantage_client.StockFunction.DAILY, "IBM").json()
    await client.aclose()
    assert series.entries.latest().time == "2020-01-02"


@pytest.mark.asyncio
async def test_rate_limit_note_surfaces(make_api):
    api = make_api({"Note": "Thank you for using Alpha Vantage! Our standard API call frequency is 5 calls per minute."})
    with pytest.raises(RateLimitedError):
        await api.quote("IBM").json()


def test_get_api_client_requires_key():
    with pytest.raises(ConfigurationError):
        get_api_client(ClientSettings(_env_file=None, alphavantage_api_key=None))


def test_get_api_client_reads_provider_and_urls():
    settings = ClientSettings(
        _env_file=None,
        alphavantage_api_key="secret",
        alphavantage_provider="rapid_api",
        rapidapi_base_url="https://proxy.example/query",
    )
    transport = StubTransport("{}")
    api = get_api_client(settings, transport)
    assert api.provider is Provider.RAPID_API
    assert api.api_key == "secret"
    assert api.transport is transport


@pytest.mark.asyncio
async def test_get_api_client_uses_configured_base_url():
    settings = ClientSettings(
        _env_file=None,
        alphavantage_api_key="secret",
        alphavantage_base_url="https://mirror.example/query",
    )
    transport = StubTransport(QUOTE)
    api = get_api_client(settings, transport)
    await api.quote("IBM").json()
    assert transport.calls[0]["url"].startswith("https://mirror.example/query?function=GLOBAL_QUOTE")


def test_repr_hides_key():
    api = ApiClient.set_api("supersecret", StubTransport("{}"))
    assert "supersecret" not in repr(api)


@pytest.mark.asyncio
async def test_set_api_without_client_ignores_environment(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "-1")
    monkeypatch.setenv("ALPHAVANTAGE_PROVIDER", "rapid_api")
    api = ApiClient.set_api("demo")
    assert api.provider is Provider.ALPHA_VANTAGE
    assert isinstance(api.transport, HttpxTransport)
    await api.aclose()
