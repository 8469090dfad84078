"""Timestamped record collections returned by the series endpoints."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional, TypeVar

import pandas as pd

from .decoder import as_mapping
from .errors import InsufficientEntriesError

if TYPE_CHECKING:
    from .fields import FieldTable

EntryT = TypeVar("EntryT")


class EntryList(List[EntryT]):
    """A list of records carrying a ``time`` string.

    Timestamps are zero-padded ISO-like strings (``2024-01-02`` or
    ``2024-01-02 16:00:00``), so comparing them as strings orders them in time.
    """

    def __init__(self, entries: Iterable[EntryT] = (), *, entry_type: Optional[type[EntryT]] = None) -> None:
        super().__init__(entries)
        self.entry_type = entry_type

    def find(self, time: str) -> Optional[EntryT]:
        """Return the entry stamped exactly ``time``, or ``None``."""

        return next((entry for entry in self if entry.time == time), None)

    def latest(self) -> EntryT:
        """Return a copy of the most recent entry, or a zero-valued one when empty."""

        entry_type = self.entry_type
        if entry_type is None:
            if not self:
                raise TypeError("EntryList needs an entry_type to build an empty entry")
            entry_type = type(self[0])
        latest = entry_type()
        for entry in self:
            if latest.time < entry.time:
                latest = entry
        # Mapping fields (indicator values) must not be shared with the stored entry
        copies = {
            field.name: dict(getattr(latest, field.name))
            for field in dataclasses.fields(latest)
            if isinstance(getattr(latest, field.name), dict)
        }
        return dataclasses.replace(latest, **copies)

    def latest_n(self, n: int) -> list[EntryT]:
        """Return the ``n`` most recent entries, newest first."""

        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        ordered = sorted(self, key=lambda entry: entry.time, reverse=True)
        if n > len(ordered):
            raise InsufficientEntriesError(len(ordered))
        return ordered[:n]

    def to_frame(self) -> pd.DataFrame:
        """Return the entries as a DataFrame indexed by timestamp, oldest first."""

        if not self:
            return pd.DataFrame()
        rows: list[dict[str, Any]] = []
        for entry in self:
            row = dataclasses.asdict(entry)
            values = row.pop("values", None)
            if isinstance(values, dict):
                row.update(values)
            rows.append(row)
        df = pd.DataFrame(rows).set_index("time").sort_index()
        df.index = pd.to_datetime(df.index)
        return df

    def __repr__(self) -> str:
        return f"EntryList[{getattr(self.entry_type, '__name__', '?')}]({list.__repr__(self)})"


def build_entries(
    series: Mapping[str, Any],
    table: "FieldTable",
    entry_type: type[EntryT],
    **placeholders: str,
) -> EntryList[EntryT]:
    """Flatten a ``{time: {key: value}}`` section into an :class:`EntryList`."""

    entries: EntryList[EntryT] = EntryList(entry_type=entry_type)
    for time, record in series.items():
        entries.append(table.build(as_mapping(record, f"entry {time}"), placeholders, time=time))
    return entries


__all__ = ["EntryList", "build_entries"]
