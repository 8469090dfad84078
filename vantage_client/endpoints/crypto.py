"""DIGITAL_CURRENCY_*: daily, weekly and monthly series for a digital currency on a market."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.entries import EntryList, build_entries
from vantage_client.fields import FieldTable, number, text

from .common import QueryBuilder


class CryptoFunction(str, Enum):
    """Series granularity; all are refreshed daily at midnight UTC."""

    DAILY = "DIGITAL_CURRENCY_DAILY"
    WEEKLY = "DIGITAL_CURRENCY_WEEKLY"
    MONTHLY = "DIGITAL_CURRENCY_MONTHLY"


def series_key(function: CryptoFunction) -> str:
    return f"Time Series (Digital Currency {function.name.capitalize()})"


@dataclass(frozen=True)
class Entry:
    """One bar quoted in the market currency, with USD mirrors when Alpha Vantage sends them."""

    time: str = ""
    market_open: float = 0.0
    market_high: float = 0.0
    market_low: float = 0.0
    market_close: float = 0.0
    volume: float = 0.0
    usd_open: Optional[float] = None
    usd_high: Optional[float] = None
    usd_low: Optional[float] = None
    usd_close: Optional[float] = None
    market_cap: Optional[float] = None


@dataclass(frozen=True)
class Crypto:
    information: str = ""
    digital_code: str = ""
    digital_name: str = ""
    market_code: str = ""
    market_name: str = ""
    last_refreshed: str = ""
    time_zone: str = ""
    entries: EntryList[Entry] = field(default_factory=lambda: EntryList(entry_type=Entry))


# Older payloads label market prices "1a. open (EUR)" next to "1b. open (USD)";
# current ones only send "1. open" in the market currency.
ENTRY_FIELDS = FieldTable(
    Entry,
    [
        number("market_open", "1a. open ({market})", "1. open"),
        number("market_high", "2a. high ({market})", "2. high"),
        number("market_low", "3a. low ({market})", "3. low"),
        number("market_close", "4a. close ({market})", "4. close"),
        number("volume", "5. volume"),
        number("usd_open", "1b. open (USD)", required=False),
        number("usd_high", "2b. high (USD)", required=False),
        number("usd_low", "3b. low (USD)", required=False),
        number("usd_close", "4b. close (USD)", required=False),
        number("market_cap", "6. market cap (USD)", required=False),
    ],
    exclude=("time",),
)

META_FIELDS = FieldTable(
    Crypto,
    [
        text("information", "1. Information"),
        text("digital_code", "2. Digital Currency Code"),
        text("digital_name", "3. Digital Currency Name"),
        text("market_code", "4. Market Code"),
        text("market_name", "5. Market Name"),
        text("last_refreshed", "6. Last Refreshed"),
        text("time_zone", "7. Time Zone"),
    ],
    exclude=("entries",),
)


class CryptoHelper(ResponseEnvelope):
    meta_data: dict[str, Any] | None = Field(default=None, alias="Meta Data")

    def convert(self, function: CryptoFunction = CryptoFunction.DAILY) -> Crypto:
        series = self.extra_section(series_key(function), prefix="Time Series (Digital Currency")
        self.validate_payload(self.meta_data, series)
        meta = as_mapping(self.meta_data, "Meta Data")
        market = str(meta.get("4. Market Code", ""))
        entries = build_entries(as_mapping(series, "time series"), ENTRY_FIELDS, Entry, market=market)
        return META_FIELDS.build(meta, entries=entries)


class CryptoBuilder(QueryBuilder[Crypto]):
    helper = CryptoHelper

    def __init__(self, api_client, function: CryptoFunction, symbol: str, market: str) -> None:
        super().__init__(api_client)
        self.function = CryptoFunction(function)
        self.symbol = symbol
        self.market = market

    def _required_params(self) -> dict[str, str]:
        return {"function": self.function.value, "symbol": self.symbol, "market": self.market}

    def _convert(self, helper: CryptoHelper) -> Crypto:
        return helper.convert(self.function)


__all__ = ["Crypto", "CryptoBuilder", "CryptoFunction", "CryptoHelper", "Entry"]
