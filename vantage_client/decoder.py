"""Response envelope shared by every Alpha Vantage payload.

Alpha Vantage answers almost everything with HTTP 200 and signals problems by
adding one of three top-level strings to the body:

- ``Error Message``: the request was rejected (bad symbol, function, params)
- ``Note``: call frequency warning
- ``Information``: valid query, but there is nothing to return

Every wire model extends :class:`ResponseEnvelope` and calls
:meth:`ResponseEnvelope.raise_for_sentinel` before trusting its payload.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ApiRejectedError, DecodeError, EmptyResponseError, NoDataError, RateLimitedError

logger = logging.getLogger(__name__)

EnvelopeT = TypeVar("EnvelopeT", bound="ResponseEnvelope")


def detect_common_helper_error(
    information: str | None,
    error_message: str | None,
    note: str | None,
) -> None:
    """Raise the error matching the first sentinel set, checked in priority order."""

    if error_message is not None:
        logger.warning("Alpha Vantage rejected the request: %s", error_message)
        raise ApiRejectedError(error_message)
    if note is not None:
        logger.warning("Alpha Vantage throttled the request: %s", note)
        raise RateLimitedError(note)
    if information is not None:
        logger.warning("Alpha Vantage returned no data: %s", information)
        raise NoDataError(information)


class ResponseEnvelope(BaseModel):
    """Sentinel fields plus whatever other top-level sections the body carries."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    information: str | None = Field(default=None, alias="Information")
    error_message: str | None = Field(default=None, alias="Error Message")
    note: str | None = Field(default=None, alias="Note")

    def raise_for_sentinel(self) -> None:
        detect_common_helper_error(self.information, self.error_message, self.note)

    def validate_payload(self, *sections: Any) -> None:
        """Run the sentinel check, then require every payload section to be present."""

        self.raise_for_sentinel()
        if any(section is None for section in sections):
            raise EmptyResponseError()

    @property
    def extra_sections(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def extra_section(self, key: str | None = None, *, prefix: str | None = None) -> Any:
        """Return a flattened top-level section by exact key, else the single one matching ``prefix``."""

        extras = self.extra_sections
        if key is not None and key in extras:
            return extras[key]
        if prefix is None:
            return None
        candidates = [value for name, value in extras.items() if name.startswith(prefix)]
        if len(candidates) == 1:
            return candidates[0]
        return None


def decode_response(text: str, helper: type[EnvelopeT]) -> EnvelopeT:
    """Parse a raw response body into ``helper``."""

    try:
        return helper.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeError(f"Could not decode response into {helper.__name__}: {exc.error_count()} error(s)") from exc


def as_mapping(section: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(section, Mapping):
        raise DecodeError(f"Expected {name} to be an object, got {type(section).__name__}")
    return section


__all__ = ["ResponseEnvelope", "as_mapping", "decode_response", "detect_common_helper_error"]
