"""SECTOR: US sector performance over ranked windows (real-time up to 10 years)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import Field

from vantage_client.decoder import ResponseEnvelope, as_mapping
from vantage_client.errors import EmptyResponseError
from vantage_client.fields import FieldTable, text, to_float

from .common import QueryBuilder

RANK_PREFIX = "Rank "


@dataclass(frozen=True)
class SectorRank:
    """Percent change per sector over one window, e.g. ``Rank B: 1 Day Performance``."""

    rank: str = ""
    performance: dict[str, Optional[float]] = field(default_factory=dict)


@dataclass(frozen=True)
class Sector:
    information: str = ""
    last_refreshed: str = ""
    ranks: list[SectorRank] = field(default_factory=list)

    def rank(self, label: str) -> Optional[SectorRank]:
        """Return the window whose label starts with ``label`` (``"Rank A"`` or the full label)."""

        return next((rank for rank in self.ranks if rank.rank.startswith(label)), None)


META_FIELDS = FieldTable(
    Sector,
    [
        text("information", "Information"),
        text("last_refreshed", "Last Refreshed"),
    ],
    exclude=("ranks",),
)


class SectorHelper(ResponseEnvelope):
    meta_data: dict[str, Any] | None = Field(default=None, alias="Meta Data")

    def convert(self) -> Sector:
        self.validate_payload(self.meta_data)
        ranks = [
            SectorRank(
                rank=label,
                performance={name: to_float(raw) for name, raw in as_mapping(values, label).items()},
            )
            for label, values in sorted(self.extra_sections.items())
            if label.startswith(RANK_PREFIX)
        ]
        if not ranks:
            raise EmptyResponseError()
        return META_FIELDS.build(as_mapping(self.meta_data, "Meta Data"), ranks=ranks)


class SectorBuilder(QueryBuilder[Sector]):
    helper = SectorHelper

    def _required_params(self) -> dict[str, str]:
        return {"function": "SECTOR"}


__all__ = ["Sector", "SectorBuilder", "SectorHelper", "SectorRank"]
