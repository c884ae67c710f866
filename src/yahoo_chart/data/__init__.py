"""Data fetching and normalization modules for yahoo-chart."""

from src.yahoo_chart.data.fetchers.base import BaseFetcher
from src.yahoo_chart.data.fetchers.yahoo_fetcher import YahooChartFetcher
from src.yahoo_chart.data.normalizer import ChartNormalizer

__all__ = [
    "BaseFetcher",
    "YahooChartFetcher",
    "ChartNormalizer",
]
