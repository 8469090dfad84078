"""Explicit mapping from Alpha Vantage's ordinal-prefixed keys to record fields.

Alpha Vantage labels values with keys such as ``"1. open"`` or
``"6. Time Zone"`` and shifts the ordinal between functions. Each record type
gets a :class:`FieldTable` listing, per field, the candidate keys it may appear
under. Tables are checked against their dataclass when they are built, so a
module with a stale table fails on import rather than at the first request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, Callable, Iterable, Mapping

from .errors import DecodeError, SchemaMismatchError

logger = logging.getLogger(__name__)

# Placeholders Alpha Vantage uses when a value is not available.
_MISSING_MARKERS = frozenset({"", "-", ".", "None", "none", "null"})


def to_float(raw: Any) -> float | None:
    """Cast an upstream numeric string (``"12.5"``, ``"0.43%"``) to ``float``."""

    if raw is None:
        return None
    if isinstance(raw, bool):
        raise DecodeError(f"Expected a number, got {raw!r}")
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if text in _MISSING_MARKERS:
        return None
    if text.endswith("%"):
        text = text[:-1].strip()
    try:
        return float(text)
    except ValueError as exc:
        raise DecodeError(f"Expected a number, got {raw!r}") from exc


def to_str(raw: Any) -> str | None:
    if raw is None:
        return None
    return str(raw)


def to_optional_str(raw: Any) -> str | None:
    if raw is None:
        return None
    text = str(raw)
    return None if text.strip() in _MISSING_MARKERS else text


@dataclass(frozen=True)
class FieldSpec:
    """One record field and the upstream keys that may carry it."""

    name: str
    keys: tuple[str, ...]
    required: bool = True
    cast: Callable[[Any], Any] = to_float


def number(name: str, *keys: str, required: bool = True) -> FieldSpec:
    return FieldSpec(name=name, keys=keys, required=required, cast=to_float)


def text(name: str, *keys: str, required: bool = True) -> FieldSpec:
    return FieldSpec(
        name=name,
        keys=keys,
        required=required,
        cast=to_str if required else to_optional_str,
    )


class FieldTable:
    """Field-by-field recipe turning one upstream mapping into a dataclass.

    ``exclude`` names dataclass fields the table does not fill (for example
    ``time`` on entries, which comes from the enclosing key).
    """

    def __init__(self, target: type, specs: Iterable[FieldSpec], *, exclude: Iterable[str] = ()) -> None:
        self.target = target
        self.specs = tuple(specs)
        self.exclude = frozenset(exclude)

        expected = {field.name for field in dataclass_fields(target)} - self.exclude
        mapped = [spec.name for spec in self.specs]
        duplicated = sorted({name for name in mapped if mapped.count(name) > 1})
        missing = sorted(expected - set(mapped))
        unknown = sorted(set(mapped) - expected)
        if duplicated or missing or unknown:
            raise SchemaMismatchError(
                f"Field table for {target.__name__} is inconsistent: "
                f"missing={missing} unknown={unknown} duplicated={duplicated}"
            )
        for spec in self.specs:
            if not spec.keys:
                raise SchemaMismatchError(f"Field {target.__name__}.{spec.name} has no upstream keys")

    def extract(
        self,
        record: Mapping[str, Any],
        placeholders: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Return the table's fields read from ``record``.

        Required fields with none of their keys present raise
        :class:`DecodeError`; optional ones come back as ``None``.
        """

        if not isinstance(record, Mapping):
            raise DecodeError(f"Expected an object for {self.target.__name__}, got {type(record).__name__}")

        placeholders = placeholders or {}
        values: dict[str, Any] = {}
        seen: set[str] = set()
        for spec in self.specs:
            raw = None
            for key in spec.keys:
                key = key.format(**placeholders)
                seen.add(key)
                if key in record:
                    raw = record[key]
                    break
            value = spec.cast(raw)
            if value is None and spec.required:
                raise DecodeError(
                    f"{self.target.__name__}.{spec.name}: none of {list(spec.keys)} present in response"
                )
            values[spec.name] = value

        unrecognised = set(record) - seen
        if unrecognised:
            logger.debug("Ignoring unmapped %s keys: %s", self.target.__name__, sorted(unrecognised))
        return values

    def build(
        self,
        record: Mapping[str, Any],
        placeholders: Mapping[str, str] | None = None,
        **extra: Any,
    ) -> Any:
        return self.target(**self.extract(record, placeholders), **extra)


__all__ = ["FieldSpec", "FieldTable", "number", "text", "to_float", "to_optional_str", "to_str"]
