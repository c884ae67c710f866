from abc import ABC, abstractmethod
from typing import Any

import pandas as pd

from src.yahoo_chart.models import Candle, InstrumentMetadata
from src.yahoo_chart.query import ChartQuery


class BaseFetcher(ABC):
    """Abstract base class for historical chart data fetchers.

    Each call issues a single blocking request; nothing is cached or
    retried between calls.
    """

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """Issue one GET and return the response body.

        Args:
            url: Fully rendered chart URL.

        Returns:
            bytes: The raw response body of a 2xx response.
        """
        pass

    @abstractmethod
    def load(self, query: ChartQuery) -> tuple[InstrumentMetadata, list[Candle]]:
        """Fetch a chart and normalize it into metadata and candles.

        Args:
            query: Configured chart query.

        Returns:
            tuple: Instrument metadata and candles in delivery order.
        """
        pass

    @abstractmethod
    def load_frame(self, query: ChartQuery) -> tuple[InstrumentMetadata, pd.DataFrame]:
        """Fetch a chart and normalize it into metadata and an OHLCV DataFrame.

        Args:
            query: Configured chart query.

        Returns:
            tuple: Instrument metadata and a DataFrame with 'Open', 'High',
                'Low', 'Close', 'AdjustedClose', 'Volume' indexed by timestamp.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the fetcher (e.g., HTTP sessions)."""
        pass

    def __enter__(self) -> "BaseFetcher":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()
