"""Normalization of chart payloads into metadata, candles and frames."""

import logging
from collections.abc import Iterator
from datetime import datetime, tzinfo
from typing import NamedTuple

import pandas as pd
from pydantic import ValidationError

from src.yahoo_chart.errors import DecodeError
from src.yahoo_chart.models import Candle, ChartPayload, ChartResult, InstrumentMetadata
from src.yahoo_chart.query.time_selection import DATE_TIME_FORMAT

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["Open", "High", "Low", "Close", "AdjustedClose", "Volume"]


class _Sample(NamedTuple):
    unix_time: int
    open: float
    high: float
    low: float
    close: float
    adj_close: float
    volume: int


class ChartNormalizer:
    """Turns raw chart bytes into InstrumentMetadata plus candles or a DataFrame.

    Samples are walked by position: sample ``i`` of a quote block belongs to
    ``timestamp[i]`` of its result. Only samples with a positive volume are
    kept, in the order delivered.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        """Initialize the normalizer.

        Args:
            tz: Zone used to format candle timestamps. None uses local time.
        """
        self.tz = tz

    def decode(self, body: bytes | str) -> ChartPayload:
        """Validate the raw document against the chart shape.

        Raises:
            DecodeError: If the body is not JSON, does not match the expected
                shape, or carries an endpoint error instead of results. A null
                result without an error block is reported here too, so an
                empty window surfaces as an error rather than empty metadata.
        """
        try:
            payload = ChartPayload.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Invalid chart payload: {e}") from e

        chart = payload.chart
        if chart.result is None:
            if chart.error is not None:
                raise DecodeError(
                    f"Chart error {chart.error.code}: {chart.error.description}"
                )
            raise DecodeError("Chart payload has no result")
        return payload

    def parse(self, body: bytes | str) -> tuple[InstrumentMetadata, list[Candle]]:
        """Decode a payload and project it into metadata and candles.

        Args:
            body: Raw response body.

        Returns:
            Metadata of the last result and every candle with a positive volume.
        """
        payload = self.decode(body)
        metadata = self._metadata(payload)
        candles = [
            Candle(
                timestamp=self.format_timestamp(sample.unix_time),
                unix_time=sample.unix_time,
                open=sample.open,
                high=sample.high,
                low=sample.low,
                close=sample.close,
                volume=sample.volume,
            )
            for result in payload.chart.result
            for sample in self._samples(result)
        ]
        logger.debug(f"Parsed {len(candles)} candles for {metadata.symbol}")
        return metadata, candles

    def to_frame(self, body: bytes | str) -> tuple[InstrumentMetadata, pd.DataFrame]:
        """Decode a payload into metadata and an OHLCV DataFrame.

        The frame has the columns Open, High, Low, Close, AdjustedClose and
        Volume, and is indexed by the formatted timestamp ('Date').
        """
        payload = self.decode(body)
        metadata = self._metadata(payload)
        rows: list[list[float]] = []
        labels: list[str] = []
        for result in payload.chart.result:
            for sample in self._samples(result):
                labels.append(self.format_timestamp(sample.unix_time))
                rows.append(
                    [
                        sample.open,
                        sample.high,
                        sample.low,
                        sample.close,
                        sample.adj_close,
                        float(sample.volume),
                    ]
                )

        df = pd.DataFrame(
            rows,
            columns=FRAME_COLUMNS,
            index=pd.Index(labels, name="Date", dtype=object),
            dtype=float,
        )
        logger.debug(f"Built frame with {len(df)} rows for {metadata.symbol}")
        return metadata, df

    def format_timestamp(self, unix_time: int) -> str:
        try:
            moment = datetime.fromtimestamp(unix_time, tz=self.tz)
        except (ValueError, OverflowError, OSError) as e:
            raise DecodeError(f"Timestamp {unix_time} is out of range") from e
        return moment.strftime(DATE_TIME_FORMAT)

    @staticmethod
    def _metadata(payload: ChartPayload) -> InstrumentMetadata:
        """Return the last result's meta. Raises DecodeError for an empty result list."""
        results = payload.chart.result
        if not results:
            raise DecodeError("Chart payload has an empty result list")
        # Last result wins, no merge.
        return results[-1].meta

    def _samples(self, result: ChartResult) -> Iterator[_Sample]:
        timestamps = result.timestamp
        adjclose = result.indicators.adjclose[0].adjclose if result.indicators.adjclose else []

        for quote in result.indicators.quote:
            lengths = quote.series_lengths()
            count = min([*lengths.values(), len(timestamps)])
            if any(n != len(quote.open) for n in lengths.values()) or count < len(quote.open):
                logger.warning(
                    f"Misaligned chart series for {result.meta.symbol}: "
                    f"{lengths}, timestamp={len(timestamps)}; reading {count} samples"
                )
            use_adjclose = len(adjclose) >= count

            for i in range(count):
                volume = quote.volume[i]
                if volume is None or volume <= 0:
                    continue
                prices = (quote.open[i], quote.high[i], quote.low[i], quote.close[i])
                if any(p is None for p in prices):
                    continue
                open_, high, low, close = prices
                adj_close = adjclose[i] if use_adjclose and adjclose[i] is not None else close
                yield _Sample(
                    unix_time=timestamps[i],
                    open=open_,
                    high=high,
                    low=low,
                    close=close,
                    adj_close=adj_close,
                    volume=volume,
                )
