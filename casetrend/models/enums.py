"""
Enumeration types for the case trend service.

All enums inherit from str to ensure JSON serialization compatibility.
"""

from enum import Enum


class Metric(str, Enum):
    """
    Key prefixes used by the sparse counter store.

    Daily snapshots live under `<metric>_<seriesKey>_<millis>`, scalar values
    under `<metric>_<seriesKey>`.
    """

    CASES = "cases"
    DEATHS = "deaths"
    TRAVEL = "travel"


class ParsePolicy(str, Enum):
    """
    Handling of a non-numeric value stored under a timestamped key.

    STRICT rejects the whole series, LENIENT drops the entry so the day is
    zero-filled like any other gap.
    """

    STRICT = "strict"
    LENIENT = "lenient"


class TrendBasis(str, Enum):
    """Which series the trend comparator runs on."""

    TRIMMED = "trimmed"
    UNTRIMMED = "untrimmed"


class TrendDirection(str, Enum):
    """Direction of the last window relative to the previous one."""

    MORE = "more"
    FEWER = "fewer"
    SAME = "same"


class AlertLevel(str, Enum):
    """Display severity attached to a trend comparison."""

    INFO = "info"
    WARNING = "warning"
