"""TIME_SERIES_* builder and decoding tests."""

from __future__ import annotations

import pytest

from conftest import load_payload
from vantage_client import OutputSize, StockFunction, TimeSeriesInterval
from vantage_client.endpoints.stock_time import Entry, TimeSeries
from vantage_client.errors import DecodeError, EmptyResponseError, NoDataError


def test_builder_omits_unset_optional_params(make_api):
    builder = make_api("{}").stock_time(StockFunction.DAILY, "IBM")
    assert builder.create_url() == "?function=TIME_SERIES_DAILY&symbol=IBM"


def test_builder_includes_set_optional_params(make_api):
    builder = (
        make_api("{}")
        .stock_time(StockFunction.INTRADAY, "IBM")
        .interval(TimeSeriesInterval.FIVE_MIN)
        .output_size(OutputSize.FULL)
        .adjusted(False)
        .extended_hours(True)
        .month("2009-01")
    )
    assert builder.params() == {
        "function": "TIME_SERIES_INTRADAY",
        "symbol": "IBM",
        "interval": "5min",
        "outputsize": "full",
        "adjusted": "false",
        "extended_hours": "true",
        "month": "2009-01",
    }


@pytest.mark.asyncio
async def test_daily_series_decodes(make_api):
    series = await make_api(load_payload("daily.json")).stock_time(StockFunction.DAILY, "IBM").json()
    assert series.symbol == "IBM"
    assert series.last_refreshed == "2020-01-02"
    assert series.time_zone == "US/Eastern"
    assert series.output_size == "Compact"
    assert series.interval is None
    assert len(series.entries) == 2
    assert series.entries.find("2020-01-01").volume == 2540185.0


@pytest.mark.asyncio
async def test_latest_picks_newest_bar(make_api):
    series = await make_api(load_payload("daily.json")).stock_time(StockFunction.DAILY, "IBM").json()
    latest = series.entries.latest()
    assert latest.time == "2020-01-02"
    assert latest.close == 135.42


@pytest.mark.asyncio
async def test_adjusted_series_reads_shifted_volume(make_api):
    api = make_api(load_payload("daily_adjusted.json"))
    series = await api.stock_time(StockFunction.DAILY_ADJUSTED, "IBM").json()
    bar = series.entries.find("2024-05-01")
    assert bar.volume == 4030587.0
    assert bar.adjusted_close == 162.7844
    assert bar.dividend_amount == 1.66
    assert bar.split_coefficient == 1.0
    assert [entry.time for entry in series.entries.latest_n(2)] == ["2024-05-03", "2024-05-02"]


@pytest.mark.asyncio
async def test_intraday_series_uses_interval_section(make_api):
    payload = {
        "Meta Data": {
            "1. Information": "Intraday (5min) open, high, low, close prices and volume",
            "2. Symbol": "IBM",
            "3. Last Refreshed": "2024-05-03 19:55:00",
            "4. Interval": "5min",
            "5. Output Size": "Compact",
            "6. Time Zone": "US/Eastern",
        },
        "Time Series (5min)": {
            "2024-05-03 19:55:00": {
                "1. open": "165.9000",
                "2. high": "166.0000",
                "3. low": "165.9000",
                "4. close": "166.0000",
                "5. volume": "38",
            }
        },
    }
    builder = make_api(payload).stock_time(StockFunction.INTRADAY, "IBM").interval(TimeSeriesInterval.FIVE_MIN)
    series = await builder.json()
    assert series.interval == "5min"
    assert series.time_zone == "US/Eastern"
    assert series.entries.latest().time == "2024-05-03 19:55:00"


@pytest.mark.asyncio
async def test_missing_series_is_empty_response(make_api):
    payload = load_payload("daily.json")
    del payload["Time Series (Daily)"]
    with pytest.raises(EmptyResponseError):
        await make_api(payload).stock_time(StockFunction.DAILY, "IBM").json()


@pytest.mark.asyncio
async def test_information_sentinel_is_no_data(make_api):
    api = make_api({"Information": "This is a premium endpoint."})
    with pytest.raises(NoDataError):
        await api.stock_time(StockFunction.DAILY_ADJUSTED, "IBM").json()


@pytest.mark.asyncio
async def test_bar_missing_close_is_decode_error(make_api):
    payload = load_payload("daily.json")
    del payload["Time Series (Daily)"]["2020-01-01"]["4. close"]
    with pytest.raises(DecodeError):
        await make_api(payload).stock_time(StockFunction.DAILY, "IBM").json()


def test_empty_series_latest_is_zero_entry():
    assert TimeSeries().entries.latest() == Entry()
