"""
Series reconstruction - raw store mappings to a trimmed dense series.

    raw mapping -> extract_series -> densify -> trim_incomplete_tail
                                          \\-> compare_trend

Everything here is a pure function of its arguments: no I/O, no clock reads,
no shared state, so concurrent calls for different series keys are safe.
"""

from typing import Mapping, NamedTuple, Optional

import structlog

from casetrend.models.enums import Metric, ParsePolicy, TrendBasis
from casetrend.models.series import DenseSeries, ReconstructedSeries, TrendComparison

from .densifier import densify
from .extractor import extract_series
from .trend import compare_trend
from .trimmer import trim_incomplete_tail

logger = structlog.get_logger()


class Reconstruction(NamedTuple):
    """Result of a full reconstruction run."""

    dense: DenseSeries
    series: ReconstructedSeries
    trend: Optional[TrendComparison]


def densify_raw(
    series_key: str,
    cases_raw: Mapping[str, str],
    deaths_raw: Mapping[str, str],
    now: int,
    policy: ParsePolicy = ParsePolicy.STRICT,
) -> DenseSeries:
    """
    Extract both metrics and densify them, without trimming.

    Raises:
        SeriesParseError: Under ParsePolicy.STRICT, if either mapping holds a
            non-numeric value under a timestamped key
    """
    cases = extract_series(cases_raw, Metric.CASES, series_key, policy)
    deaths = extract_series(deaths_raw, Metric.DEATHS, series_key, policy)
    return densify(cases, deaths, now)


def reconstruct(
    series_key: str,
    cases_raw: Mapping[str, str],
    deaths_raw: Mapping[str, str],
    now: int,
    policy: ParsePolicy = ParsePolicy.STRICT,
) -> ReconstructedSeries:
    """
    Rebuild the display series for one series key.

    Args:
        series_key: Normalised series key
        cases_raw: Store mapping scanned under `cases_<series_key>*`
        deaths_raw: Store mapping scanned under `deaths_<series_key>*`
        now: Clock value in epoch milliseconds
        policy: Handling of non-numeric values under timestamped keys

    Returns:
        Trimmed series; labels, case_values and death_values have equal length

    Raises:
        SeriesParseError: Under ParsePolicy.STRICT, on a corrupt entry
    """
    return trim_incomplete_tail(densify_raw(series_key, cases_raw, deaths_raw, now, policy))


def reconstruct_with_trend(
    series_key: str,
    cases_raw: Mapping[str, str],
    deaths_raw: Mapping[str, str],
    now: int,
    policy: ParsePolicy = ParsePolicy.STRICT,
    basis: TrendBasis = TrendBasis.TRIMMED,
) -> Reconstruction:
    """
    Reconstruct the series and compare its trend.

    `basis` selects whether the comparator sees the trimmed series (what is
    displayed) or the dense series before the trailing day was dropped.
    """
    dense = densify_raw(series_key, cases_raw, deaths_raw, now, policy)
    series = trim_incomplete_tail(dense)
    source = series if basis == TrendBasis.TRIMMED else dense
    trend = compare_trend(source.case_values)

    logger.info(
        "series_reconstructed",
        series_key=series_key,
        points=len(series),
        trimmed=series.trimmed,
        trend_basis=basis.value,
        trend=trend.direction.value if trend else None,
    )
    return Reconstruction(dense=dense, series=series, trend=trend)
