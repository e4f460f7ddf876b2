"""
Data Ingestion Service

CONTRACT:
    Input:  CandleQuery
    Output: list[Candle] (newest first)

RESPONSIBILITIES:
    - Translate pairs / timeframes to provider conventions
    - Fetch OHLC time series from Twelve Data
    - Surface provider errors as UpstreamDataError

NO CACHING - every evaluation fetches a fresh series.
"""

from fxsignal.services.data_ingestion.interface import CandleSupplierInterface
from fxsignal.services.data_ingestion.symbols import map_interval, map_symbol
from fxsignal.services.data_ingestion.twelvedata_adapter import (
    TwelveDataClient,
    close_twelvedata_client,
    get_twelvedata_client,
    parse_time_series,
)

__all__ = [
    "CandleSupplierInterface",
    "TwelveDataClient",
    "close_twelvedata_client",
    "get_twelvedata_client",
    "map_interval",
    "map_symbol",
    "parse_time_series",
]
