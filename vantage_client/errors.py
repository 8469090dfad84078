"""Exceptions raised by the Alpha Vantage client."""

from __future__ import annotations


class AlphaVantageError(RuntimeError):
    """Base class for every failure surfaced by the client."""


class ConfigurationError(AlphaVantageError):
    """Raised when settings cannot produce a usable client."""


class RequestFailedError(AlphaVantageError):
    """Raised when the transport could not produce a response body."""


class DecodeError(AlphaVantageError):
    """Raised when a response body does not match the expected JSON shape."""


class SchemaMismatchError(AlphaVantageError):
    """Raised when a field table disagrees with the record it populates."""


class _UpstreamMessageError(AlphaVantageError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ApiRejectedError(_UpstreamMessageError):
    """Alpha Vantage answered with ``Error Message`` (bad symbol, function or parameters)."""


class RateLimitedError(_UpstreamMessageError):
    """Alpha Vantage answered with ``Note``, its call frequency warning."""


class NoDataError(_UpstreamMessageError):
    """Alpha Vantage answered with ``Information`` instead of data."""


class EmptyResponseError(AlphaVantageError):
    """Raised when no sentinel is set but a required payload section is missing."""

    def __init__(self, message: str = "Alpha Vantage returned an empty response") -> None:
        super().__init__(message)


class InsufficientEntriesError(AlphaVantageError):
    """Raised when more ranked entries are requested than a collection holds."""

    def __init__(self, available: int) -> None:
        super().__init__(f"Only {available} entries are present")
        self.available = available


__all__ = [
    "AlphaVantageError",
    "ApiRejectedError",
    "ConfigurationError",
    "DecodeError",
    "EmptyResponseError",
    "InsufficientEntriesError",
    "NoDataError",
    "RateLimitedError",
    "RequestFailedError",
    "SchemaMismatchError",
]
