"""Candle model for OHLCV candlestick data."""

from pydantic import BaseModel, Field


class Candle(BaseModel):
    """Normalized OHLCV sample taken from one chart quote block.

    Only samples with a positive volume become candles.
    """

    timestamp: str = Field(
        ..., description="Bucket start as local wall-clock time ('YYYY-MM-DD HH:MM')"
    )
    unix_time: int = Field(..., description="Bucket start (Unix timestamp in seconds)")

    # OHLCV data
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="Highest price during the period")
    low: float = Field(..., description="Lowest price during the period")
    close: float = Field(..., description="Closing price")
    volume: int = Field(..., gt=0, description="Traded volume")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
