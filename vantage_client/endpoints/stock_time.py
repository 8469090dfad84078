"""TIME_SERIES_*: intraday, daily, weekly and monthly stock series."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.entries import EntryList, build_entries
from vantage_client.fields import FieldTable, number, text

from .common import OutputSize, QueryBuilder, TimeSeriesInterval


class StockFunction(str, Enum):
    INTRADAY = "TIME_SERIES_INTRADAY"
    DAILY = "TIME_SERIES_DAILY"
    DAILY_ADJUSTED = "TIME_SERIES_DAILY_ADJUSTED"
    WEEKLY = "TIME_SERIES_WEEKLY"
    WEEKLY_ADJUSTED = "TIME_SERIES_WEEKLY_ADJUSTED"
    MONTHLY = "TIME_SERIES_MONTHLY"
    MONTHLY_ADJUSTED = "TIME_SERIES_MONTHLY_ADJUSTED"


_SERIES_KEYS = {
    StockFunction.DAILY: "Time Series (Daily)",
    StockFunction.DAILY_ADJUSTED: "Time Series (Daily)",
    StockFunction.WEEKLY: "Weekly Time Series",
    StockFunction.WEEKLY_ADJUSTED: "Weekly Adjusted Time Series",
    StockFunction.MONTHLY: "Monthly Time Series",
    StockFunction.MONTHLY_ADJUSTED: "Monthly Adjusted Time Series",
}


def series_key(function: StockFunction, interval: str | None = None) -> str | None:
    if function is StockFunction.INTRADAY:
        return f"Time Series ({interval})" if interval else None
    return _SERIES_KEYS[function]


@dataclass(frozen=True)
class Entry:
    time: str = ""
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0
    adjusted_close: Optional[float] = None
    dividend_amount: Optional[float] = None
    split_coefficient: Optional[float] = None


@dataclass(frozen=True)
class TimeSeries:
    information: str = ""
    symbol: str = ""
    last_refreshed: str = ""
    time_zone: str = ""
    interval: Optional[str] = None
    output_size: Optional[str] = None
    entries: EntryList[Entry] = field(default_factory=lambda: EntryList(entry_type=Entry))


ENTRY_FIELDS = FieldTable(
    Entry,
    [
        number("open", "1. open"),
        number("high", "2. high"),
        number("low", "3. low"),
        number("close", "4. close"),
        # Adjusted series move volume to the sixth slot
        number("volume", "6. volume", "5. volume"),
        number("adjusted_close", "5. adjusted close", required=False),
        number("dividend_amount", "7. dividend amount", required=False),
        number("split_coefficient", "8. split coefficient", required=False),
    ],
    exclude=("time",),
)

META_FIELDS = FieldTable(
    TimeSeries,
    [
        text("information", "1. Information"),
        text("symbol", "2. Symbol"),
        text("last_refreshed", "3. Last Refreshed"),
        text("interval", "4. Interval", required=False),
        text("output_size", "4. Output Size", "5. Output Size", required=False),
        text("time_zone", "4. Time Zone", "5. Time Zone", "6. Time Zone"),
    ],
    exclude=("entries",),
)


class TimeSeriesHelper(ResponseEnvelope):
    meta_data: dict[str, Any] | None = Field(default=None, alias="Meta Data")

    def convert(self, function: StockFunction = StockFunction.DAILY, interval: str | None = None) -> TimeSeries:
        series = self.extra_section(series_key(function, interval), prefix="Time Series (")
        self.validate_payload(self.meta_data, series)
        entries = build_entries(as_mapping(series, "time series"), ENTRY_FIELDS, Entry)
        return META_FIELDS.build(as_mapping(self.meta_data, "Meta Data"), entries=entries)


class TimeSeriesBuilder(QueryBuilder[TimeSeries]):
    helper = TimeSeriesHelper

    def __init__(self, api_client, function: StockFunction, symbol: str) -> None:
        super().__init__(api_client)
        self.function = StockFunction(function)
        self.symbol = symbol

    def _required_params(self) -> dict[str, str]:
        return {"function": self.function.value, "symbol": self.symbol}

    def interval(self, interval: TimeSeriesInterval) -> "TimeSeriesBuilder":
        self._set("interval", TimeSeriesInterval(interval))
        return self

    def output_size(self, output_size: OutputSize) -> "TimeSeriesBuilder":
        self._set("outputsize", OutputSize(output_size))
        return self

    def adjusted(self, adjusted: bool) -> "TimeSeriesBuilder":
        """Intraday only: whether bars are split/dividend adjusted."""

        self._set("adjusted", adjusted)
        return self

    def extended_hours(self, extended_hours: bool) -> "TimeSeriesBuilder":
        """Intraday only: include pre and post market bars."""

        self._set("extended_hours", extended_hours)
        return self

    def month(self, month: str) -> "TimeSeriesBuilder":
        """Intraday only: a past month in ``YYYY-MM`` form."""

        self._set("month", month)
        return self

    def _convert(self, helper: TimeSeriesHelper) -> TimeSeries:
        return helper.convert(self.function, self._optional.get("interval"))


__all__ = ["Entry", "StockFunction", "TimeSeries", "TimeSeriesBuilder", "TimeSeriesHelper"]
