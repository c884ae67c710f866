"""Shared chart payload fixtures."""

import json
from typing import Any

import pytest


def _make_payload(
    timestamps: list[int],
    open_: list[Any],
    high: list[Any],
    low: list[Any],
    close: list[Any],
    volume: list[Any],
    symbol: str = "ZAL.DE",
    adjclose: list[Any] | None = None,
) -> dict:
    """Build a one-result, one-quote chart document.

    Args:
        timestamps: Unix timestamps of the result.
        open_, high, low, close, volume: Quote series.
        symbol: Symbol reported in the metadata block.
        adjclose: Optional adjusted close series.

    Returns:
        Chart document as a dict, ready for json.dumps.
    """
    indicators: dict[str, Any] = {
        "quote": [
            {"open": open_, "high": high, "low": low, "close": close, "volume": volume}
        ]
    }
    if adjclose is not None:
        indicators["adjclose"] = [{"adjclose": adjclose}]
    return {
        "chart": {
            "result": [
                {
                    "meta": {
                        "currency": "EUR",
                        "symbol": symbol,
                        "exchangeName": "GER",
                        "regularMarketPrice": 21.5,
                        "dataGranularity": "5m",
                        "range": "1d",
                        "gmtoffset": 3600,
                    },
                    "timestamp": timestamps,
                    "indicators": indicators,
                }
            ],
            "error": None,
        }
    }


@pytest.fixture
def make_payload():
    """Factory for chart documents."""
    return _make_payload


@pytest.fixture
def to_body():
    """Serialize a chart document to response bytes."""
    return lambda payload: json.dumps(payload).encode()
