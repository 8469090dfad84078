"""Pieces shared by every endpoint builder."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import quote, urlencode

from vantage_client.decoder import ResponseEnvelope

if TYPE_CHECKING:
    from vantage_client.api import ApiClient

ResultT = TypeVar("ResultT")


class OutputSize(str, Enum):
    """How many data points series endpoints return."""

    COMPACT = "compact"  # latest 100 points
    FULL = "full"


class TimeSeriesInterval(str, Enum):
    """Bar width for intraday stock and forex series."""

    ONE_MIN = "1min"
    FIVE_MIN = "5min"
    FIFTEEN_MIN = "15min"
    THIRTY_MIN = "30min"
    SIXTY_MIN = "60min"


def format_param(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryBuilder(Generic[ResultT]):
    """Collects parameters for one Alpha Vantage function and fetches it.

    Subclasses set ``helper`` to their wire model and implement
    :meth:`_required_params`. Optional parameters are only sent once a setter
    stored them; Alpha Vantage treats an absent parameter differently from
    an explicit default for some functions.
    """

    helper: type[ResponseEnvelope] = ResponseEnvelope

    def __init__(self, api_client: "ApiClient") -> None:
        self._api_client = api_client
        self._optional: dict[str, str] = {}

    def _required_params(self) -> dict[str, str]:
        raise NotImplementedError

    def _set(self, key: str, value: Any) -> None:
        self._optional[key] = format_param(value)

    def params(self) -> dict[str, str]:
        return {**self._required_params(), **self._optional}

    def create_url(self) -> str:
        """Return the ``?function=...`` query path for the current parameters."""

        return "?" + urlencode(self.params(), quote_via=quote)

    def _convert(self, helper: Any) -> ResultT:
        return helper.convert()

    async def json(self) -> ResultT:
        """Fetch the function and return its converted result.

        Raises the :mod:`vantage_client.errors` matching a transport failure,
        an undecodable body, an upstream sentinel or a missing section.
        """

        helper = await self._api_client.get_json(self.create_url(), self.helper)
        return self._convert(helper)


__all__ = ["OutputSize", "QueryBuilder", "TimeSeriesInterval", "format_param"]
