"""GLOBAL_QUOTE: latest price and volume for one symbol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.errors import EmptyResponseError
from vantage_client.fields import FieldTable, number, text

from .common import QueryBuilder


@dataclass(frozen=True)
class Quote:
    symbol: str = ""
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    price: float = 0.0
    volume: float = 0.0
    last_day: str = ""
    previous: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0


QUOTE_FIELDS = FieldTable(
    Quote,
    [
        text("symbol", "01. symbol"),
        number("open", "02. open"),
        number("high", "03. high"),
        number("low", "04. low"),
        number("price", "05. price"),
        number("volume", "06. volume"),
        text("last_day", "07. latest trading day"),
        number("previous", "08. previous close"),
        number("change", "09. change"),
        number("change_percent", "10. change percent"),
    ],
)


class QuoteHelper(ResponseEnvelope):
    global_quote: dict[str, Any] | None = Field(default=None, alias="Global Quote")

    def convert(self) -> Quote:
        self.validate_payload(self.global_quote)
        # Unknown symbols come back as {"Global Quote": {}}
        if not self.global_quote:
            raise EmptyResponseError()
        return QUOTE_FIELDS.build(as_mapping(self.global_quote, "Global Quote"))


class QuoteBuilder(QueryBuilder[Quote]):
    helper = QuoteHelper

    def __init__(self, api_client, symbol: str) -> None:
        super().__init__(api_client)
        self.symbol = symbol

    def _required_params(self) -> dict[str, str]:
        return {"function": "GLOBAL_QUOTE", "symbol": self.symbol}


__all__ = ["Quote", "QuoteBuilder", "QuoteHelper"]
