"""Tests for ChartNormalizer projection of chart payloads."""

import json
from datetime import timezone

import pandas as pd
import pytest

from src.yahoo_chart.data.normalizer import FRAME_COLUMNS, ChartNormalizer
from src.yahoo_chart.errors import DecodeError
from src.yahoo_chart.models import Candle, InstrumentMetadata

T0 = 1704096000  # 2024-01-01 08:00 UTC


@pytest.fixture
def normalizer():
    return ChartNormalizer(tz=timezone.utc)


class TestParse:
    """Tests for parse()."""

    def test_parse_returns_metadata(self, normalizer, make_payload, to_body):
        """Test that the meta block becomes InstrumentMetadata."""
        body = to_body(make_payload([T0], [1.0], [1.0], [1.0], [1.0], [1]))

        metadata, _ = normalizer.parse(body)

        assert metadata == InstrumentMetadata(
            currency="EUR",
            symbol="ZAL.DE",
            exchange_name="GER",
            regular_market_price=21.5,
            data_granularity="5m",
            range="1d",
        )

    def test_parse_single_candle_round_trip(self, normalizer, make_payload, to_body):
        """Test that the zero-volume second sample is dropped."""
        body = to_body(
            make_payload(
                [T0, T0 + 300],
                open_=[10.0, 10.5],
                high=[10.2, 10.7],
                low=[9.9, 10.3],
                close=[10.1, 10.6],
                volume=[5, 0],
            )
        )

        _, candles = normalizer.parse(body)

        assert candles == [
            Candle(
                timestamp="2024-01-01 08:00",
                unix_time=T0,
                open=10.0,
                high=10.2,
                low=9.9,
                close=10.1,
                volume=5,
            )
        ]

    def test_parse_drops_non_positive_volume_in_order(self, normalizer, make_payload, to_body):
        """Test that only positive volumes survive, in delivery order."""
        timestamps = [T0, T0 + 300, T0 + 600]
        body = to_body(
            make_payload(
                timestamps,
                open_=[1.0, 2.0, 3.0],
                high=[1.0, 2.0, 3.0],
                low=[1.0, 2.0, 3.0],
                close=[1.0, 2.0, 3.0],
                volume=[0, 100, 50],
            )
        )

        _, candles = normalizer.parse(body)

        assert [c.unix_time for c in candles] == [T0 + 300, T0 + 600]
        assert [c.timestamp for c in candles] == ["2024-01-01 08:05", "2024-01-01 08:10"]
        assert [c.volume for c in candles] == [100, 50]

    def test_parse_drops_negative_volume(self, normalizer, make_payload, to_body):
        body = to_body(make_payload([T0, T0 + 60], [1.0, 2.0], [1.0, 2.0], [1.0, 2.0], [1.0, 2.0], [-3, 7]))

        _, candles = normalizer.parse(body)

        assert [c.volume for c in candles] == [7]

    def test_parse_skips_null_samples(self, normalizer, make_payload, to_body):
        """Test that gaps reported as null are not turned into candles."""
        body = to_body(
            make_payload(
                [T0, T0 + 300, T0 + 600],
                open_=[1.0, None, 3.0],
                high=[1.0, None, 3.0],
                low=[1.0, None, 3.0],
                close=[1.0, None, 3.0],
                volume=[10, None, 30],
            )
        )

        _, candles = normalizer.parse(body)

        assert [c.unix_time for c in candles] == [T0, T0 + 600]

    def test_parse_stops_at_shortest_series(self, normalizer, make_payload, to_body):
        """Test that misaligned arrays are never read past their end."""
        body = to_body(
            make_payload(
                [T0, T0 + 300],
                open_=[1.0, 2.0, 3.0],
                high=[1.0, 2.0, 3.0],
                low=[1.0, 2.0, 3.0],
                close=[1.0, 2.0, 3.0],
                volume=[10, 20, 30],
            )
        )

        _, candles = normalizer.parse(body)

        assert [c.volume for c in candles] == [10, 20]

    def test_parse_short_quote_block_ignores_extra_timestamps(self, normalizer, make_payload, to_body):
        body = to_body(make_payload([T0, T0 + 300, T0 + 600], [1.0], [1.0], [1.0], [1.0], [10]))

        _, candles = normalizer.parse(body)

        assert len(candles) == 1

    def test_parse_last_result_metadata_wins(self, normalizer, make_payload, to_body):
        """Test that metadata comes from the last result and candles from all."""
        first = make_payload([T0], [1.0], [1.0], [1.0], [1.0], [1], symbol="AAA")
        second = make_payload([T0 + 60], [2.0], [2.0], [2.0], [2.0], [2], symbol="BBB")
        first["chart"]["result"].extend(second["chart"]["result"])

        metadata, candles = normalizer.parse(to_body(first))

        assert metadata.symbol == "BBB"
        assert [c.volume for c in candles] == [1, 2]

    def test_parse_result_without_samples(self, normalizer, make_payload, to_body):
        """Test a result with meta only (no trades in the window)."""
        payload = {"chart": {"result": [{"meta": {"symbol": "ZAL.DE"}}], "error": None}}

        metadata, candles = normalizer.parse(json.dumps(payload))

        assert metadata.symbol == "ZAL.DE"
        assert metadata.currency == ""
        assert candles == []


class TestDecodeErrors:
    """Tests for structurally invalid payloads."""

    def test_missing_chart_key(self, normalizer, make_payload, to_body):
        with pytest.raises(DecodeError):
            normalizer.parse(b'{"foo": {}}')

    def test_invalid_json(self, normalizer, make_payload, to_body):
        with pytest.raises(DecodeError):
            normalizer.parse(b"<html>not json</html>")

    def test_wrong_series_type(self, normalizer, make_payload, to_body):
        payload = make_payload([T0], ["abc"], [1.0], [1.0], [1.0], [1])

        with pytest.raises(DecodeError):
            normalizer.parse(to_body(payload))

    def test_missing_meta_symbol(self, normalizer, make_payload, to_body):
        payload = make_payload([T0], [1.0], [1.0], [1.0], [1.0], [1])
        del payload["chart"]["result"][0]["meta"]["symbol"]

        with pytest.raises(DecodeError):
            normalizer.parse(to_body(payload))

    def test_endpoint_error_block(self, normalizer, make_payload, to_body):
        """Test that a null result with an error block reports the error."""
        payload = {
            "chart": {
                "result": None,
                "error": {"code": "Not Found", "description": "No data found, symbol may be delisted"},
            }
        }

        with pytest.raises(DecodeError, match="Not Found"):
            normalizer.parse(to_body(payload))

    def test_empty_result_list(self, normalizer, make_payload, to_body):
        with pytest.raises(DecodeError, match="empty result"):
            normalizer.parse(b'{"chart": {"result": []}}')

    def test_null_result_without_error_block(self, normalizer):
        with pytest.raises(DecodeError, match="no result"):
            normalizer.parse(b'{"chart": {"result": null, "error": null}}')

    def test_out_of_range_timestamp(self, normalizer, make_payload, to_body):
        """Test that an unrepresentable timestamp is a decode failure."""
        body = to_body(make_payload([10**15], [1.0], [1.0], [1.0], [1.0], [5]))

        with pytest.raises(DecodeError, match="out of range"):
            normalizer.parse(body)

        with pytest.raises(DecodeError, match="out of range"):
            normalizer.to_frame(body)


class TestToFrame:
    """Tests for the DataFrame variant."""

    def test_frame_columns_and_labels(self, normalizer, make_payload, to_body):
        body = to_body(
            make_payload(
                [T0, T0 + 300, T0 + 600],
                open_=[1.0, 2.0, 3.0],
                high=[1.5, 2.5, 3.5],
                low=[0.5, 1.5, 2.5],
                close=[1.2, 2.2, 3.2],
                volume=[10, 0, 30],
            )
        )

        _, df = normalizer.to_frame(body)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == FRAME_COLUMNS
        assert df.index.name == "Date"
        assert list(df.index) == ["2024-01-01 08:00", "2024-01-01 08:10"]
        assert df.loc["2024-01-01 08:10", "Open"] == 3.0
        assert df.loc["2024-01-01 08:10", "Volume"] == 30.0

    def test_frame_adjusted_close_defaults_to_close(self, normalizer, make_payload, to_body):
        body = to_body(make_payload([T0], [1.0], [1.0], [1.0], [1.25], [5]))

        _, df = normalizer.to_frame(body)

        assert df["AdjustedClose"].tolist() == [1.25]

    def test_frame_uses_adjclose_indicator(self, normalizer, make_payload, to_body):
        body = to_body(
            make_payload([T0], [1.0], [1.0], [1.0], [1.25], [5], adjclose=[1.1])
        )

        _, df = normalizer.to_frame(body)

        assert df["AdjustedClose"].tolist() == [1.1]
        assert df["Close"].tolist() == [1.25]

    def test_empty_frame_keeps_columns(self, normalizer, make_payload, to_body):
        body = to_body(make_payload([T0], [1.0], [1.0], [1.0], [1.0], [0]))

        _, df = normalizer.to_frame(body)

        assert df.empty
        assert list(df.columns) == FRAME_COLUMNS
