"""
Trailing-Incompleteness Trimmer.

A zero case count on the most recent day means the ingestion job has not yet
produced data for today. That one point is dropped from every aligned list.
Only the last day can be incomplete, so the trim never repeats: a zero on an
earlier day is a real zero and stays.
"""

import structlog

from casetrend.models.series import DenseSeries, ReconstructedSeries

logger = structlog.get_logger()


def trim_incomplete_tail(series: DenseSeries) -> ReconstructedSeries:
    """
    Drop the last point of `series` if its case value is zero.

    Args:
        series: Densified series, possibly empty

    Returns:
        ReconstructedSeries with at most one point fewer than `series`
    """
    if series.is_empty or series.case_values[-1] != 0:
        return ReconstructedSeries(
            days=list(series.days),
            labels=list(series.labels),
            case_values=list(series.case_values),
            death_values=list(series.death_values),
        )

    logger.debug("tail_trimmed", day=series.days[-1], points=len(series) - 1)
    return ReconstructedSeries(
        days=series.days[:-1],
        labels=series.labels[:-1],
        case_values=series.case_values[:-1],
        death_values=series.death_values[:-1],
        trimmed=True,
    )
