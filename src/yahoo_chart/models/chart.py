"""Wire models for the v8 chart endpoint response.

These mirror the JSON document returned by the endpoint and are only used
while parsing; callers receive InstrumentMetadata and Candle objects.
Yahoo emits ``null`` inside the series for buckets without trades, so the
series items are optional.
"""

from pydantic import BaseModel, Field

from src.yahoo_chart.models.metadata import InstrumentMetadata


class QuoteBlock(BaseModel):
    """One group of positionally aligned OHLCV series."""

    open: list[float | None] = Field(default_factory=list)
    high: list[float | None] = Field(default_factory=list)
    low: list[float | None] = Field(default_factory=list)
    close: list[float | None] = Field(default_factory=list)
    volume: list[int | None] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    def series_lengths(self) -> dict[str, int]:
        return {
            "open": len(self.open),
            "high": len(self.high),
            "low": len(self.low),
            "close": len(self.close),
            "volume": len(self.volume),
        }


class AdjCloseBlock(BaseModel):
    """Adjusted close series, only present for daily and coarser intervals."""

    adjclose: list[float | None] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class Indicators(BaseModel):
    quote: list[QuoteBlock] = Field(default_factory=list)
    adjclose: list[AdjCloseBlock] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class ChartResult(BaseModel):
    """A single result: metadata, timestamps and the indicator series."""

    meta: InstrumentMetadata
    timestamp: list[int] = Field(default_factory=list)
    indicators: Indicators = Field(default_factory=Indicators)

    model_config = {"extra": "ignore"}


class ChartErrorBody(BaseModel):
    code: str = ""
    description: str = ""

    model_config = {"extra": "ignore"}


class Chart(BaseModel):
    result: list[ChartResult] | None = None
    error: ChartErrorBody | None = None

    model_config = {"extra": "ignore"}


class ChartPayload(BaseModel):
    """Top-level document: ``{"chart": {"result": [...], "error": ...}}``."""

    chart: Chart

    model_config = {"extra": "ignore"}
