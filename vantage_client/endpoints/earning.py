"""EARNINGS: annual and quarterly EPS history for a company."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.fields import FieldTable, number, text

from .common import QueryBuilder


@dataclass(frozen=True)
class AnnualEarning:
    fiscal_date_ending: str = ""
    reported_eps: Optional[float] = None


@dataclass(frozen=True)
class QuarterlyEarning:
    fiscal_date_ending: str = ""
    reported_date: Optional[str] = None
    reported_eps: Optional[float] = None
    estimated_eps: Optional[float] = None
    surprise: Optional[float] = None
    surprise_percentage: Optional[float] = None


@dataclass(frozen=True)
class Earning:
    symbol: str = ""
    annual_earning: list[AnnualEarning] = field(default_factory=list)
    quarterly_earning: list[QuarterlyEarning] = field(default_factory=list)


# Alpha Vantage sends the string "None" for figures it does not have yet.
ANNUAL_FIELDS = FieldTable(
    AnnualEarning,
    [
        text("fiscal_date_ending", "fiscalDateEnding"),
        number("reported_eps", "reportedEPS", required=False),
    ],
)

QUARTERLY_FIELDS = FieldTable(
    QuarterlyEarning,
    [
        text("fiscal_date_ending", "fiscalDateEnding"),
        text("reported_date", "reportedDate", required=False),
        number("reported_eps", "reportedEPS", required=False),
        number("estimated_eps", "estimatedEPS", required=False),
        number("surprise", "surprise", required=False),
        number("surprise_percentage", "surprisePercentage", required=False),
    ],
)


class EarningHelper(ResponseEnvelope):
    symbol: str | None = None
    annual_earnings: list[Any] | None = Field(default=None, alias="annualEarnings")
    quarterly_earnings: list[Any] | None = Field(default=None, alias="quarterlyEarnings")

    def convert(self) -> Earning:
        self.validate_payload(self.symbol, self.annual_earnings, self.quarterly_earnings)
        return Earning(
            symbol=self.symbol,
            annual_earning=[
                ANNUAL_FIELDS.build(as_mapping(item, "annualEarnings entry")) for item in self.annual_earnings
            ],
            quarterly_earning=[
                QUARTERLY_FIELDS.build(as_mapping(item, "quarterlyEarnings entry"))
                for item in self.quarterly_earnings
            ],
        )


class EarningBuilder(QueryBuilder[Earning]):
    helper = EarningHelper

    def __init__(self, api_client, symbol: str) -> None:
        super().__init__(api_client)
        self.symbol = symbol

    def _required_params(self) -> dict[str, str]:
        return {"function": "EARNINGS", "symbol": self.symbol}


__all__ = ["AnnualEarning", "Earning", "EarningBuilder", "EarningHelper", "QuarterlyEarning"]
