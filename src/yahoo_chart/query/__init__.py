"""Query building for the chart endpoint."""

from src.yahoo_chart.query.builder import (
    ChartQuery,
    QueryOption,
    date_range_option,
    interval_option,
    specific_date_option,
    time_period_option,
)
from src.yahoo_chart.query.time_selection import (
    DateRange,
    FixedDateSelection,
    PeriodSelection,
    PriceInterval,
    RangeSelection,
    TimeSelection,
    to_unix_timestamp,
)

__all__ = [
    "ChartQuery",
    "QueryOption",
    "date_range_option",
    "interval_option",
    "specific_date_option",
    "time_period_option",
    "DateRange",
    "FixedDateSelection",
    "PeriodSelection",
    "PriceInterval",
    "RangeSelection",
    "TimeSelection",
    "to_unix_timestamp",
]
