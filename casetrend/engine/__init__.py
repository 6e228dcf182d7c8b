"""
Time-series reconstruction engine.

This package turns the sparse daily counters of the key-value store into a
dense display series and a short trend signal:

- Key parsing: the `<metric>_<seriesKey>[_<millis>]` convention
- Country registry: series keys the store is populated with
- Extraction: raw mapping -> day -> value for one metric/series
- Densification: zero-filled daily grid from the first observation to now
- Trimming: drop an incomplete trailing day
- Trend comparison: last 5 days vs the previous 5

All engine functions are pure: the clock and the store contents are passed in.
"""

from casetrend.engine.countries import COUNTRIES_BY_KEY, country_name
from casetrend.engine.densifier import densify, format_day_label
from casetrend.engine.errors import (
    InvalidSeriesKeyError,
    ParseError,
    SeriesParseError,
    UnknownSeriesKeyError,
)
from casetrend.engine.extractor import extract_scalar, extract_series
from casetrend.engine.key_parser import normalize_series_key, parse_entry, parse_number
from casetrend.engine.reconstruction import (
    Reconstruction,
    reconstruct,
    reconstruct_with_trend,
)
from casetrend.engine.trend import compare_trend
from casetrend.engine.trimmer import trim_incomplete_tail

__all__ = [
    "COUNTRIES_BY_KEY",
    "InvalidSeriesKeyError",
    "ParseError",
    "Reconstruction",
    "SeriesParseError",
    "UnknownSeriesKeyError",
    "compare_trend",
    "country_name",
    "densify",
    "extract_scalar",
    "extract_series",
    "format_day_label",
    "normalize_series_key",
    "parse_entry",
    "parse_number",
    "reconstruct",
    "reconstruct_with_trend",
    "trim_incomplete_tail",
]
