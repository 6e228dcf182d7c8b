"""
Trend Comparator - last 5 days against the 5 days before them.

The two windows never overlap and always end at the most recent point, so the
comparison is "trend as of now" rather than anchored to a calendar week.
"""

from typing import Optional, Sequence

import structlog

from casetrend.models.enums import AlertLevel, TrendDirection
from casetrend.models.keys import Number
from casetrend.models.series import TrendComparison

logger = structlog.get_logger()

WINDOW_DAYS = 5
MIN_POINTS = 2 * WINDOW_DAYS


def compare_trend(case_values: Sequence[Number]) -> Optional[TrendComparison]:
    """
    Compare the sum of the last window with the sum of the previous one.

    Args:
        case_values: Daily case counts, oldest first

    Returns:
        TrendComparison, or None when fewer than 10 points are available
    """
    if len(case_values) < MIN_POINTS:
        return None

    values = list(case_values)
    current = sum(values[-WINDOW_DAYS:])
    previous = sum(values[-MIN_POINTS:-WINDOW_DAYS])

    if current == previous:
        direction = TrendDirection.SAME
    elif current > previous:
        direction = TrendDirection.MORE
    else:
        direction = TrendDirection.FEWER

    comparison = TrendComparison(
        current_window_sum=current,
        previous_window_sum=previous,
        direction=direction,
        difference=abs(current - previous),
        alert_level=AlertLevel.WARNING if direction == TrendDirection.MORE else AlertLevel.INFO,
    )
    logger.debug(
        "trend_compared",
        current=current,
        previous=previous,
        direction=direction.value,
    )
    return comparison
