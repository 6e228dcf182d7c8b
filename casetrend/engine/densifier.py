"""
Gap-Filling Densifier - sparse day mappings to a contiguous daily series.

The day grid is anchored at the first observed day, not at a calendar epoch:
every emitted day is `start + k * MS_PER_DAY`. Days with no store entry are
emitted with a value of zero. The walk stops at `now`, so the series grows by
one point roughly every 24 hours; callers pass `now` explicitly.
"""

from datetime import datetime, timezone
from typing import Mapping

import structlog

from casetrend.models.keys import Number
from casetrend.models.series import DenseSeries
from casetrend.utils.clock import MS_PER_DAY

logger = structlog.get_logger()

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_day_label(day: int) -> str:
    """UTC display label for an epoch-millisecond day, e.g. "5 Mar '20"."""
    dt = datetime.fromtimestamp(day / 1000, tz=timezone.utc)
    return f"{dt.day} {_MONTHS[dt.month - 1]} '{dt.year % 100:02d}"


def densify(
    cases: Mapping[int, Number],
    deaths: Mapping[int, Number],
    now: int,
) -> DenseSeries:
    """
    Build aligned dense case and death series.

    Args:
        cases: Day -> case count for one series key
        deaths: Day -> death count for the same series key
        now: Clock value in epoch milliseconds; the last emitted day is the
            last grid day strictly before it

    Returns:
        DenseSeries from the smallest day present in either mapping up to
        `now`. Empty when both mappings are empty.
    """
    if not cases and not deaths:
        return DenseSeries()

    start = min(min(cases, default=now), min(deaths, default=now))

    days: list[int] = []
    labels: list[str] = []
    case_values: list[Number] = []
    death_values: list[Number] = []

    it_day = start
    while it_day < now:
        days.append(it_day)
        labels.append(format_day_label(it_day))
        case_values.append(cases.get(it_day, 0))
        death_values.append(deaths.get(it_day, 0))
        it_day += MS_PER_DAY

    # Entries off the grid (e.g. stored at a different hour) are never read
    off_grid = sum(
        1 for day in (*cases, *deaths) if (day - start) % MS_PER_DAY != 0
    )
    if off_grid:
        logger.warning("series_off_grid_entries", count=off_grid, start=start)

    logger.debug("series_densified", start=start, points=len(days))
    return DenseSeries(
        days=days,
        labels=labels,
        case_values=case_values,
        death_values=death_values,
    )
