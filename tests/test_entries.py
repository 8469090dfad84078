"""EntryList selection tests."""

from __future__ import annotations

import pytest

from vantage_client.endpoints.stock_time import Entry
from vantage_client.endpoints.technical_indicator import IndicatorEntry
from vantage_client.entries import EntryList
from vantage_client.errors import InsufficientEntriesError


def _entries() -> EntryList[Entry]:
    return EntryList(
        [
            Entry(time="2020-01-01", open=1.0, close=2.0),
            Entry(time="2020-01-03", open=3.0, close=4.0),
            Entry(time="2020-01-02", open=5.0, close=6.0),
        ],
        entry_type=Entry,
    )


def test_find_matches_exact_time():
    entries = _entries()
    assert entries.find("2020-01-02").open == 5.0
    assert entries.find("2020-01-04") is None


def test_latest_returns_most_recent_copy():
    entries = _entries()
    latest = entries.latest()
    assert latest.time == "2020-01-03"
    assert latest == entries[1]
    assert latest is not entries[1]


def test_latest_of_empty_is_zero_record():
    assert EntryList(entry_type=Entry).latest() == Entry()


def test_latest_infers_type_from_entries():
    entries = EntryList([Entry(time="2020-01-01"), Entry(time="2020-01-02", close=3.0)])
    assert entries.latest() == Entry(time="2020-01-02", close=3.0)


def test_latest_of_untyped_empty_list_raises():
    with pytest.raises(TypeError):
        EntryList().latest()


def test_latest_copies_indicator_values():
    entries = EntryList([IndicatorEntry(time="2024-05-03", values={"SMA": 1.5})], entry_type=IndicatorEntry)
    latest = entries.latest()
    latest.values["SMA"] = 9.0
    assert entries[0].values == {"SMA": 1.5}


def test_latest_n_orders_newest_first():
    times = [entry.time for entry in _entries().latest_n(2)]
    assert times == ["2020-01-03", "2020-01-02"]


def test_latest_n_too_many_reports_available():
    with pytest.raises(InsufficientEntriesError) as excinfo:
        _entries().latest_n(5)
    assert excinfo.value.available == 3


def test_latest_n_zero_is_empty():
    assert _entries().latest_n(0) == []


def test_latest_n_negative_is_rejected():
    with pytest.raises(ValueError):
        _entries().latest_n(-1)


def test_to_frame_sorts_by_time():
    df = _entries().to_frame()
    assert list(df["close"]) == [2.0, 6.0, 4.0]
    assert str(df.index[0].date()) == "2020-01-01"


def test_to_frame_flattens_indicator_values():
    entries = EntryList(
        [IndicatorEntry(time="2024-05-03", values={"SMA": 1.5})],
        entry_type=IndicatorEntry,
    )
    df = entries.to_frame()
    assert list(df["SMA"]) == [1.5]


def test_to_frame_of_empty_is_empty():
    assert EntryList(entry_type=Entry).to_frame().empty
