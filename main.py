"""Print metadata and intraday candles for one instrument."""

import logging

from src.yahoo_chart.config import get_settings
from src.yahoo_chart.data import YahooChartFetcher
from src.yahoo_chart.errors import YahooChartError
from src.yahoo_chart.query import ChartQuery, DateRange, PriceInterval

SYMBOL = "ZAL.DE"


def main() -> int:
    """Main entry point for the application."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    query = (
        ChartQuery.create(SYMBOL, settings=settings)
        .with_interval(PriceInterval.FIVE_MINUTES)
        .with_date_range(DateRange.ONE_DAY)
    )

    with YahooChartFetcher(settings) as fetcher:
        try:
            metadata, candles = fetcher.load(query)
        except YahooChartError as e:
            print(f"❌ {e}")
            return 1

    print(metadata)
    for candle in candles:
        print(candle)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
