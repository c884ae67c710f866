"""Instrument metadata reported alongside chart data."""

from pydantic import BaseModel, Field


class InstrumentMetadata(BaseModel):
    """Snapshot of the ``meta`` block of a chart result.

    Field names follow Python conventions; the camelCase wire names are
    accepted as aliases.
    """

    currency: str = Field("", description="Trading currency (e.g., 'EUR')")
    symbol: str = Field(..., description="Instrument symbol (e.g., 'ZAL.DE')")
    exchange_name: str = Field(
        "", alias="exchangeName", description="Exchange code (e.g., 'GER')"
    )
    regular_market_price: float = Field(
        0.0, alias="regularMarketPrice", description="Last regular-session price"
    )
    data_granularity: str = Field(
        "", alias="dataGranularity", description="Interval of the returned samples"
    )
    range: str = Field("", description="Requested range token, empty for periods")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }
