"""Async client for the Alpha Vantage market data API."""

from .api import ApiClient, Provider, get_api_client
from .client import HttpClient, HttpxTransport
from .endpoints import (
    CryptoFunction,
    ForexFunction,
    OutputSize,
    StockFunction,
    TechnicalIndicatorInterval,
    TimeSeriesInterval,
)
from .entries import EntryList
from .errors import (
    AlphaVantageError,
    ApiRejectedError,
    ConfigurationError,
    DecodeError,
    EmptyResponseError,
    InsufficientEntriesError,
    NoDataError,
    RateLimitedError,
    RequestFailedError,
    SchemaMismatchError,
)

set_api = ApiClient.set_api
set_rapid_api = ApiClient.set_rapid_api

__version__ = "0.1.0"

__all__ = [
    "AlphaVantageError",
    "ApiClient",
    "ApiRejectedError",
    "ConfigurationError",
    "CryptoFunction",
    "DecodeError",
    "EmptyResponseError",
    "EntryList",
    "ForexFunction",
    "HttpClient",
    "HttpxTransport",
    "InsufficientEntriesError",
    "NoDataError",
    "OutputSize",
    "Provider",
    "RateLimitedError",
    "RequestFailedError",
    "SchemaMismatchError",
    "StockFunction",
    "TechnicalIndicatorInterval",
    "TimeSeriesInterval",
    "get_api_client",
    "set_api",
    "set_rapid_api",
]
