"""httpx-based fetcher for the Yahoo Finance chart endpoint."""

import logging

import httpx
import pandas as pd

from src.yahoo_chart.config import Settings, get_settings
from src.yahoo_chart.data.fetchers.base import BaseFetcher
from src.yahoo_chart.data.normalizer import ChartNormalizer
from src.yahoo_chart.errors import HTTPStatusError, TransportError
from src.yahoo_chart.models import Candle, InstrumentMetadata
from src.yahoo_chart.query import ChartQuery

logger = logging.getLogger(__name__)


class YahooChartFetcher(BaseFetcher):
    """Loads chart data over a synchronous httpx client."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
        normalizer: ChartNormalizer | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            settings: Client settings. Defaults to the cached environment settings.
            client: Pre-built httpx client. When given, the caller owns it and
                close() leaves it open.
            normalizer: Payload normalizer. Defaults to one using the
                configured time zone.
        """
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=self.settings.TIMEOUT_S,
            follow_redirects=True,
            headers={"User-Agent": self.settings.USER_AGENT},
        )
        self.normalizer = normalizer or ChartNormalizer(tz=self.settings.tzinfo())

    def fetch(self, url: str) -> bytes:
        """Issue one GET and return the body of a successful response.

        Raises:
            TransportError: If no response was received.
            HTTPStatusError: If the status is not 2xx.
        """
        logger.debug(f"GET {url}")
        try:
            response = self.client.get(url, follow_redirects=True)
        except httpx.TransportError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        body = response.content
        if not response.is_success:
            text = body.decode(response.encoding or "utf-8", errors="replace")
            logger.error(f"Chart request failed with status {response.status_code}")
            raise HTTPStatusError(response.status_code, text)
        return body

    def load(self, query: ChartQuery) -> tuple[InstrumentMetadata, list[Candle]]:
        return self.normalizer.parse(self.fetch(query.url))

    def load_frame(self, query: ChartQuery) -> tuple[InstrumentMetadata, pd.DataFrame]:
        return self.normalizer.to_frame(self.fetch(query.url))

    def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            self.client.close()
