"""Economic indicators (REAL_GDP, CPI, TREASURY_YIELD, UNEMPLOYMENT, ...)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.fields import FieldTable, number, text

from .common import QueryBuilder


@dataclass(frozen=True)
class DataPoint:
    date: str = ""
    value: Optional[float] = None


@dataclass(frozen=True)
class EconomicIndicator:
    name: str = ""
    interval: str = ""
    unit: str = ""
    data: list[DataPoint] = field(default_factory=list)


# Gaps in a series come through as "."
DATA_POINT_FIELDS = FieldTable(
    DataPoint,
    [
        text("date", "date"),
        number("value", "value", required=False),
    ],
)


class EconomicIndicatorHelper(ResponseEnvelope):
    name: str | None = None
    interval: str | None = None
    unit: str | None = None
    data: list[Any] | None = None

    def convert(self) -> EconomicIndicator:
        self.validate_payload(self.name, self.interval, self.unit, self.data)
        return EconomicIndicator(
            name=self.name,
            interval=self.interval,
            unit=self.unit,
            data=[DATA_POINT_FIELDS.build(as_mapping(item, "data entry")) for item in self.data],
        )


class EconomicIndicatorBuilder(QueryBuilder[EconomicIndicator]):
    helper = EconomicIndicatorHelper

    def __init__(self, api_client, function: str) -> None:
        super().__init__(api_client)
        self.function = function

    def _required_params(self) -> dict[str, str]:
        return {"function": self.function}

    def interval(self, interval: str) -> "EconomicIndicatorBuilder":
        """Sampling such as ``annual``, ``quarterly``, ``monthly`` or ``daily``."""

        self._set("interval", interval)
        return self

    def maturity(self, maturity: str) -> "EconomicIndicatorBuilder":
        """TREASURY_YIELD only: ``3month``, ``2year``, ``5year``, ``7year``, ``10year`` or ``30year``."""

        self._set("maturity", maturity)
        return self


__all__ = ["DataPoint", "EconomicIndicator", "EconomicIndicatorBuilder", "EconomicIndicatorHelper"]
