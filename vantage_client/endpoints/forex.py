"""FX_*: intraday, daily, weekly and monthly currency pair series."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.entries import EntryList, build_entries
from vantage_client.fields import FieldTable, number, text

from .common import OutputSize, QueryBuilder, TimeSeriesInterval


class ForexFunction(str, Enum):
    INTRADAY = "FX_INTRADAY"
    DAILY = "FX_DAILY"
    WEEKLY = "FX_WEEKLY"
    MONTHLY = "FX_MONTHLY"


def series_key(function: ForexFunction, interval: str | None = None) -> str | None:
    if function is ForexFunction.INTRADAY:
        return f"Time Series FX ({interval})" if interval else None
    return f"Time Series FX ({function.name.capitalize()})"


@dataclass(frozen=True)
class Entry:
    time: str = ""
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0


@dataclass(frozen=True)
class Forex:
    information: str = ""
    symbol_from: str = ""
    symbol_to: str = ""
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
    ],
    exclude=("time",),
)

# Intraday: 4 Last Refreshed, 5 Interval, 6 Output Size, 7 Time Zone
# Daily: 4 Output Size, 5 Last Refreshed, 6 Time Zone
# Weekly/monthly: 4 Last Refreshed, 5 Time Zone
META_FIELDS = FieldTable(
    Forex,
    [
        text("information", "1. Information"),
        text("symbol_from", "2. From Symbol"),
        text("symbol_to", "3. To Symbol"),
        text("last_refreshed", "4. Last Refreshed", "5. Last Refreshed"),
        text("interval", "5. Interval", required=False),
        text("output_size", "4. Output Size", "6. Output Size", required=False),
        text("time_zone", "5. Time Zone", "6. Time Zone", "7. Time Zone"),
    ],
    exclude=("entries",),
)


class ForexHelper(ResponseEnvelope):
    meta_data: dict[str, Any] | None = Field(default=None, alias="Meta Data")

    def convert(self, function: ForexFunction = ForexFunction.DAILY, interval: str | None = None) -> Forex:
        series = self.extra_section(series_key(function, interval), prefix="Time Series FX (")
        self.validate_payload(self.meta_data, series)
        entries = build_entries(as_mapping(series, "time series"), ENTRY_FIELDS, Entry)
        return META_FIELDS.build(as_mapping(self.meta_data, "Meta Data"), entries=entries)


class ForexBuilder(QueryBuilder[Forex]):
    helper = ForexHelper

    def __init__(self, api_client, function: ForexFunction, from_symbol: str, to_symbol: str) -> None:
        super().__init__(api_client)
        self.function = ForexFunction(function)
        self.from_symbol = from_symbol
        self.to_symbol = to_symbol

    def _required_params(self) -> dict[str, str]:
        return {
            "function": self.function.value,
            "from_symbol": self.from_symbol,
            "to_symbol": self.to_symbol,
        }

    def interval(self, interval: TimeSeriesInterval) -> "ForexBuilder":
        self._set("interval", TimeSeriesInterval(interval))
        return self

    def output_size(self, output_size: OutputSize) -> "ForexBuilder":
        self._set("outputsize", OutputSize(output_size))
        return self

    def _convert(self, helper: ForexHelper) -> Forex:
        return helper.convert(self.function, self._optional.get("interval"))


__all__ = ["Entry", "Forex", "ForexBuilder", "ForexFunction", "ForexHelper"]
