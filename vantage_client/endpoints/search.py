"""SYMBOL_SEARCH: best matching symbols and market information for keywords."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.fields import FieldTable, number, text

from .common import QueryBuilder


@dataclass(frozen=True)
class SearchMatch:
    symbol: str = ""
    name: str = ""
    stock_type: str = ""
    region: str = ""
    market_open: str = ""
    market_close: str = ""
    time_zone: str = ""
    currency: str = ""
    match_score: float = 0.0


@dataclass(frozen=True)
class Search:
    matches: list[SearchMatch] = field(default_factory=list)


SEARCH_MATCH_FIELDS = FieldTable(
    SearchMatch,
    [
        text("symbol", "1. symbol"),
        text("name", "2. name"),
        text("stock_type", "3. type"),
        text("region", "4. region"),
        text("market_open", "5. marketOpen"),
        text("market_close", "6. marketClose"),
        text("time_zone", "7. timezone"),
        text("currency", "8. currency"),
        number("match_score", "9. matchScore"),
    ],
)


class SearchHelper(ResponseEnvelope):
    best_matches: list[Any] | None = Field(default=None, alias="bestMatches")

    def convert(self) -> Search:
        self.validate_payload(self.best_matches)
        matches = [
            SEARCH_MATCH_FIELDS.build(as_mapping(item, "bestMatches entry"))
            for item in self.best_matches
        ]
        return Search(matches=matches)


class SearchBuilder(QueryBuilder[Search]):
    helper = SearchHelper

    def __init__(self, api_client, keywords: str) -> None:
        super().__init__(api_client)
        self.keywords = keywords

    def _required_params(self) -> dict[str, str]:
        return {"function": "SYMBOL_SEARCH", "keywords": self.keywords}


__all__ = ["Search", "SearchBuilder", "SearchHelper", "SearchMatch"]
