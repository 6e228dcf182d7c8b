"""
Pydantic v2 data models for the case trend service.

Model Organization:
    - enums: Metric prefixes, parse policy, trend basis and direction
    - keys: Raw store entries and the tagged key parse result
    - series: Dense series, trend comparison and the per-series report

Usage:
    >>> from casetrend.models import DenseSeries, TrendDirection
"""

from .enums import AlertLevel, Metric, ParsePolicy, TrendBasis, TrendDirection
from .keys import KeyParseResult, MalformedKey, Number, ParsedKey, RawEntry, ScalarKey
from .series import (
    DayPoint,
    DenseSeries,
    ReconstructedSeries,
    SeriesReport,
    SeriesTotals,
    TrendComparison,
)

__all__ = [
    # Enumerations
    "AlertLevel",
    "Metric",
    "ParsePolicy",
    "TrendBasis",
    "TrendDirection",
    # Key parsing
    "KeyParseResult",
    "MalformedKey",
    "Number",
    "ParsedKey",
    "RawEntry",
    "ScalarKey",
    # Series
    "DayPoint",
    "DenseSeries",
    "ReconstructedSeries",
    "SeriesReport",
    "SeriesTotals",
    "TrendComparison",
]
