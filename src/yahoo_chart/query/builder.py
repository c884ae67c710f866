"""Chart query builder.

A ChartQuery starts from sensible defaults (daily candles over the last
month) and is adjusted with ``with_*`` options. Each option replaces the
interval or the whole time selection, so the last one applied wins.
"""

from collections.abc import Callable
from datetime import date, tzinfo
from urllib.parse import quote

from src.yahoo_chart.config import Settings, get_settings
from src.yahoo_chart.query.time_selection import (
    DateRange,
    FixedDateSelection,
    PeriodSelection,
    PriceInterval,
    RangeSelection,
    TimeSelection,
    as_date_string,
    to_unix_timestamp,
)

CHART_PATH = "/v8/finance/chart/"
FIXED_PARAMS = "includePrePost=true&events=div%7Csplit%7Cearn&corsDomain=finance.yahoo.com"

QueryOption = Callable[["ChartQuery"], object]


class ChartQuery:
    """Request descriptor for one instrument.

    Attributes:
        symbol: Instrument symbol (e.g., 'ZAL.DE').
        interval: Candle width.
        selection: Active time selection.
        base_url: Scheme and host of the chart endpoint.
        tz: Zone used to turn dates into epoch seconds (None = local).
    """

    def __init__(
        self,
        symbol: str,
        interval: PriceInterval = PriceInterval.ONE_DAY,
        selection: TimeSelection | None = None,
        base_url: str = "https://query1.finance.yahoo.com",
        tz: tzinfo | None = None,
    ) -> None:
        self.symbol = symbol
        self.interval = PriceInterval(interval)
        self.selection: TimeSelection = selection or RangeSelection(DateRange.ONE_MONTH)
        self.base_url = base_url.rstrip("/")
        self.tz = tz

    @classmethod
    def create(
        cls, symbol: str, *options: QueryOption, settings: Settings | None = None
    ) -> "ChartQuery":
        """Build a query with the configured endpoint and zone, then apply options in order."""
        settings = settings or get_settings()
        query = cls(symbol, base_url=settings.BASE_URL, tz=settings.tzinfo())
        return query.apply(*options)

    def apply(self, *options: QueryOption) -> "ChartQuery":
        for option in options:
            option(self)
        return self

    def with_interval(self, interval: PriceInterval | str) -> "ChartQuery":
        self.interval = PriceInterval(interval)
        return self

    def with_date_range(self, date_range: DateRange | str) -> "ChartQuery":
        self.selection = RangeSelection(DateRange(date_range))
        return self

    def with_specific_date(self, day: str | date) -> "ChartQuery":
        self.selection = FixedDateSelection(as_date_string(day))
        return self

    def with_time_period(self, start: str | date, end: str | date) -> "ChartQuery":
        self.selection = PeriodSelection(as_date_string(start), as_date_string(end))
        return self

    def time_params(self) -> str:
        """Render the time selection as query parameters."""
        selection = self.selection
        if isinstance(selection, RangeSelection):
            return f"range={selection.range.value}"
        if isinstance(selection, FixedDateSelection):
            return self._period_params(selection.date, selection.date)
        if isinstance(selection, PeriodSelection):
            return self._period_params(selection.start, selection.end)
        raise TypeError(f"Unsupported time selection: {selection!r}")

    def _period_params(self, first_day: str, last_day: str) -> str:
        start = to_unix_timestamp(f"{first_day} 00:00", self.tz)
        end = to_unix_timestamp(f"{last_day} 23:59", self.tz)
        return f"period1={start}&period2={end}"

    def render(self) -> str:
        """Return the chart URL for the current state. Never raises for bad dates."""
        symbol = quote(self.symbol, safe="")
        return (
            f"{self.base_url}{CHART_PATH}{symbol}"
            f"?symbol={symbol}&{self.time_params()}"
            f"&interval={self.interval.value}&{FIXED_PARAMS}"
        )

    @property
    def url(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"ChartQuery(symbol={self.symbol!r}, interval={self.interval.value!r}, "
            f"selection={self.selection!r})"
        )


def interval_option(interval: PriceInterval | str) -> QueryOption:
    return lambda query: query.with_interval(interval)


def date_range_option(date_range: DateRange | str) -> QueryOption:
    return lambda query: query.with_date_range(date_range)


def specific_date_option(day: str | date) -> QueryOption:
    return lambda query: query.with_specific_date(day)


def time_period_option(start: str | date, end: str | date) -> QueryOption:
    return lambda query: query.with_time_period(start, end)
