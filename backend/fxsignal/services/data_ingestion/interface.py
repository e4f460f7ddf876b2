"""
Data Ingestion Service Interface

Defines the contract for the candle supplier.
"""

from abc import abstractmethod

from fxsignal.services.base import BaseService
from fxsignal.schemas.market import Candle, CandleQuery


class CandleSupplierInterface(BaseService[CandleQuery, list[Candle]]):
    """
    Candle Supplier Contract.

    INPUT: CandleQuery
        - symbol: Provider symbol (already translated, e.g. 'XAU/USD')
        - interval: Provider interval (e.g. '5min', '1h')
        - outputsize: Number of candles

    OUTPUT: list[Candle]
        - Newest first, exactly as the provider returns them

    Raises UpstreamDataError when the provider returns no usable series.
    """

    @property
    def name(self) -> str:
        return "CandleSupplier"

    @abstractmethod
    async def execute(self, input_data: CandleQuery) -> list[Candle]:
        """Fetch the candle series."""
        pass

    async def close(self) -> None:
        """Release network resources."""
        return None
