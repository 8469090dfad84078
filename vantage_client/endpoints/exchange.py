"""CURRENCY_EXCHANGE_RATE: realtime rate between two physical or digital currencies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.fields import FieldTable, number, text

from .common import QueryBuilder


@dataclass(frozen=True)
class Exchange:
    code_from: str = ""
    name_from: str = ""
    code_to: str = ""
    name_to: str = ""
    rate: float = 0.0
    last_refreshed: str = ""
    time_zone: str = ""
    bid_price: Optional[float] = None
    ask_price: Optional[float] = None


EXCHANGE_FIELDS = FieldTable(
    Exchange,
    [
        text("code_from", "1. From_Currency Code"),
        text("name_from", "2. From_Currency Name"),
        text("code_to", "3. To_Currency Code"),
        text("name_to", "4. To_Currency Name"),
        number("rate", "5. Exchange Rate"),
        text("last_refreshed", "6. Last Refreshed"),
        text("time_zone", "7. Time Zone"),
        number("bid_price", "8. Bid Price", required=False),
        number("ask_price", "9. Ask Price", required=False),
    ],
)


class ExchangeHelper(ResponseEnvelope):
    real_time: dict[str, Any] | None = Field(default=None, alias="Realtime Currency Exchange Rate")

    def convert(self) -> Exchange:
        self.validate_payload(self.real_time)
        return EXCHANGE_FIELDS.build(as_mapping(self.real_time, "Realtime Currency Exchange Rate"))


class ExchangeBuilder(QueryBuilder[Exchange]):
    helper = ExchangeHelper

    def __init__(self, api_client, from_currency: str, to_currency: str) -> None:
        super().__init__(api_client)
        self.from_currency = from_currency
        self.to_currency = to_currency

    def _required_params(self) -> dict[str, str]:
        return {
            "function": "CURRENCY_EXCHANGE_RATE",
            "from_currency": self.from_currency,
            "to_currency": self.to_currency,
        }


__all__ = ["Exchange", "ExchangeBuilder", "ExchangeHelper"]
