"""GLOBAL_QUOTE and SYMBOL_SEARCH tests."""

from __future__ import annotations

import pytest

from conftest import load_payload
from vantage_client.errors import DecodeError, EmptyResponseError, RateLimitedError

QUOTE = load_payload("global_quote.json")

SEARCH = {
    "bestMatches": [
        {
            "1. symbol": "TSCO.LON",
            "2. name": "Tesco PLC",
            "3. type": "Equity",
            "4. region": "United Kingdom",
            "5. marketOpen": "08:00",
            "6. marketClose": "16:30",
            "7. timezone": "UTC+01",
            "8. currency": "GBX",
            "9. matchScore": "0.7273",
        },
        {
            "1. symbol": "TSCDF",
            "2. name": "Tesco plc",
            "3. type": "Equity",
            "4. region": "United States",
            "5. marketOpen": "09:30",
            "6. marketClose": "16:00",
            "7. timezone": "UTC-04",
            "8. currency": "USD",
            "9. matchScore": "0.7143",
        },
    ]
}


@pytest.mark.asyncio
async def test_quote_decodes(make_api):
    quote = await make_api(QUOTE).quote("IBM").json()
    assert quote.symbol == "IBM"
    assert quote.open == 167.0
    assert quote.price == 167.15
    assert quote.volume == 3255284.0
    assert quote.last_day == "2024-05-03"
    assert quote.previous == 166.24
    assert quote.change == 0.91
    assert quote.change_percent == pytest.approx(0.5474)


@pytest.mark.asyncio
async def test_quote_for_unknown_symbol_is_empty_response(make_api):
    with pytest.raises(EmptyResponseError):
        await make_api({"Global Quote": {}}).quote("NOPE").json()


@pytest.mark.asyncio
async def test_quote_note_is_rate_limited(make_api):
    with pytest.raises(RateLimitedError) as excinfo:
        await make_api({"Note": "Please slow down"}).quote("IBM").json()
    assert excinfo.value.message == "Please slow down"


@pytest.mark.asyncio
async def test_quote_with_missing_price_is_decode_error(make_api):
    payload = {"Global Quote": dict(QUOTE["Global Quote"])}
    del payload["Global Quote"]["05. price"]
    with pytest.raises(DecodeError):
        await make_api(payload).quote("IBM").json()


@pytest.mark.asyncio
async def test_search_decodes_matches(make_api):
    search = await make_api(SEARCH).search("tesco").json()
    assert [match.symbol for match in search.matches] == ["TSCO.LON", "TSCDF"]
    first = search.matches[0]
    assert first.name == "Tesco PLC"
    assert first.stock_type == "Equity"
    assert first.region == "United Kingdom"
    assert first.market_open == "08:00"
    assert first.market_close == "16:30"
    assert first.time_zone == "UTC+01"
    assert first.currency == "GBX"
    assert first.match_score == 0.7273


@pytest.mark.asyncio
async def test_search_without_matches_is_empty_list(make_api):
    search = await make_api({"bestMatches": []}).search("zzzzzz").json()
    assert search.matches == []


@pytest.mark.asyncio
async def test_search_without_section_is_empty_response(make_api):
    with pytest.raises(EmptyResponseError):
        await make_api({}).search("tesco").json()
