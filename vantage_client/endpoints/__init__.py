"""One builder module per Alpha Vantage function family."""

from .common import OutputSize, QueryBuilder, TimeSeriesInterval
from .crypto import Crypto, CryptoBuilder, CryptoFunction
from .custom import CustomBuilder
from .earning import Earning, EarningBuilder
from .economic_indicator import EconomicIndicator, EconomicIndicatorBuilder
from .exchange import Exchange, ExchangeBuilder
from .forex import Forex, ForexBuilder, ForexFunction
from .quote import Quote, QuoteBuilder
from .search import Search, SearchBuilder, SearchMatch
from .sector import Sector, SectorBuilder, SectorRank
from .stock_time import StockFunction, TimeSeries, TimeSeriesBuilder
from .technical_indicator import TechnicalIndicator, TechnicalIndicatorBuilder, TechnicalIndicatorInterval

__all__ = [
    "Crypto",
    "CryptoBuilder",
    "CryptoFunction",
    "CustomBuilder",
    "Earning",
    "EarningBuilder",
    "EconomicIndicator",
    "EconomicIndicatorBuilder",
    "Exchange",
    "ExchangeBuilder",
    "Forex",
    "ForexBuilder",
    "ForexFunction",
    "OutputSize",
    "QueryBuilder",
    "Quote",
    "QuoteBuilder",
    "Search",
    "SearchBuilder",
    "SearchMatch",
    "Sector",
    "SectorBuilder",
    "SectorRank",
    "StockFunction",
    "TechnicalIndicator",
    "TechnicalIndicatorBuilder",
    "TechnicalIndicatorInterval",
    "TimeSeries",
    "TimeSeriesBuilder",
    "TimeSeriesInterval",
]
