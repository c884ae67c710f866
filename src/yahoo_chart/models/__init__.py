"""Models for yahoo-chart."""

from src.yahoo_chart.models.candle import Candle
from src.yahoo_chart.models.chart import (
    AdjCloseBlock,
    Chart,
    ChartErrorBody,
    ChartPayload,
    ChartResult,
    Indicators,
    QuoteBlock,
)
from src.yahoo_chart.models.metadata import InstrumentMetadata

__all__ = [
    # Candle
    "Candle",
    # Metadata
    "InstrumentMetadata",
    # Wire payload
    "AdjCloseBlock",
    "Chart",
    "ChartErrorBody",
    "ChartPayload",
    "ChartResult",
    "Indicators",
    "QuoteBlock",
]
