"""Technical indicator functions (SMA, EMA, MACD, BBANDS, MAMA, ...)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.entries import EntryList
from vantage_client.fields import FieldTable, text, to_float

from .common import QueryBuilder

SECTION_PREFIX = "Technical Analysis: "


class TechnicalIndicatorInterval(str, Enum):
    ONE_MIN = "1min"
    FIVE_MIN = "5min"
    FIFTEEN_MIN = "15min"
    THIRTY_MIN = "30min"
    SIXTY_MIN = "60min"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class IndicatorEntry:
    """Indicator values at one timestamp, keyed by value name (``SMA``, ``Real Upper Band``...)."""

    time: str = ""
    values: dict[str, Optional[float]] = field(default_factory=dict)


@dataclass(frozen=True)
class TechnicalIndicator:
    symbol: str = ""
    indicator: str = ""
    last_refreshed: str = ""
    interval: Optional[str] = None
    time_zone: Optional[str] = None
    meta_data: dict[str, Any] = field(default_factory=dict)
    entries: EntryList[IndicatorEntry] = field(default_factory=lambda: EntryList(entry_type=IndicatorEntry))


# Indicator parameters occupy a varying number of slots between interval and time zone.
META_FIELDS = FieldTable(
    TechnicalIndicator,
    [
        text("symbol", "1: Symbol"),
        text("indicator", "2: Indicator"),
        text("last_refreshed", "3: Last Refreshed"),
        text("interval", "4: Interval", required=False),
        text("time_zone", *(f"{slot}: Time Zone" for slot in range(4, 11)), required=False),
    ],
    exclude=("meta_data", "entries"),
)


class TechnicalIndicatorHelper(ResponseEnvelope):
    meta_data: dict[str, Any] | None = Field(default=None, alias="Meta Data")

    def convert(self, function: str | None = None) -> TechnicalIndicator:
        key = f"{SECTION_PREFIX}{function.upper()}" if function else None
        section = self.extra_section(key, prefix=SECTION_PREFIX)
        self.validate_payload(self.meta_data, section)

        entries = EntryList(entry_type=IndicatorEntry)
        for time, values in as_mapping(section, "technical analysis").items():
            values = as_mapping(values, f"entry {time}")
            entries.append(IndicatorEntry(time=time, values={name: to_float(raw) for name, raw in values.items()}))

        meta = as_mapping(self.meta_data, "Meta Data")
        return META_FIELDS.build(meta, meta_data=dict(meta), entries=entries)


class TechnicalIndicatorBuilder(QueryBuilder[TechnicalIndicator]):
    helper = TechnicalIndicatorHelper

    def __init__(self, api_client, function: str, symbol: str, interval: TechnicalIndicatorInterval) -> None:
        super().__init__(api_client)
        self.function = function
        self.symbol = symbol
        self.interval = TechnicalIndicatorInterval(interval)

    def _required_params(self) -> dict[str, str]:
        return {"function": self.function, "symbol": self.symbol, "interval": self.interval.value}

    def time_period(self, time_period: int) -> "TechnicalIndicatorBuilder":
        self._set("time_period", time_period)
        return self

    def series_type(self, series_type: str) -> "TechnicalIndicatorBuilder":
        """Price used for the calculation: ``close``, ``open``, ``high`` or ``low``."""

        self._set("series_type", series_type)
        return self

    def extra_param(self, key: str, value: Any) -> "TechnicalIndicatorBuilder":
        """Set an indicator specific parameter such as ``fastlimit`` or ``nbdevup``."""

        self._set(key, value)
        return self

    def _convert(self, helper: TechnicalIndicatorHelper) -> TechnicalIndicator:
        return helper.convert(self.function)


__all__ = [
    "IndicatorEntry",
    "TechnicalIndicator",
    "TechnicalIndicatorBuilder",
    "TechnicalIndicatorHelper",
    "TechnicalIndicatorInterval",
]
