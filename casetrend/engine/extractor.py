"""
Series Extractor - raw store mapping to a typed day -> value mapping.

Filters the result of a pattern scan down to the daily snapshots of one
metric/series combination. The scalar key and keys of other series that share
the scan prefix are excluded.
"""

from typing import Mapping, Optional, Union

import structlog

from casetrend.models.enums import Metric, ParsePolicy
from casetrend.models.keys import MalformedKey, Number, ParsedKey, ScalarKey

from .errors import SeriesParseError
from .key_parser import parse_entry

logger = structlog.get_logger()


def extract_series(
    raw: Mapping[str, str],
    metric: Union[Metric, str],
    series_key: str,
    policy: ParsePolicy = ParsePolicy.STRICT,
) -> dict[int, Number]:
    """
    Extract the daily snapshots of one series.

    Args:
        raw: Key/value mapping returned by the store for the metric prefix
        metric: Metric the mapping was scanned under
        series_key: Normalised series key
        policy: What to do with a non-numeric value under a timestamped key

    Returns:
        Mapping of epoch-millisecond day to value. If a day appears twice the
        last one parsed wins.

    Raises:
        SeriesParseError: Under ParsePolicy.STRICT, on the first non-numeric
            value under a timestamped key
    """
    metric = Metric(metric)
    by_day: dict[int, Number] = {}
    skipped = 0

    for key, value in raw.items():
        result = parse_entry(key, value, metric, series_key)
        if isinstance(result, ParsedKey):
            by_day[result.day] = result.value
        elif isinstance(result, MalformedKey) and result.bad_value:
            if policy == ParsePolicy.STRICT:
                logger.error(
                    "series_value_rejected",
                    metric=metric.value,
                    series_key=series_key,
                    key=key,
                )
                raise SeriesParseError(metric.value, key, value)
            skipped += 1
            logger.warning(
                "series_value_dropped",
                metric=metric.value,
                series_key=series_key,
                key=key,
                reason=result.reason,
            )

    logger.debug(
        "series_extracted",
        metric=metric.value,
        series_key=series_key,
        raw_keys=len(raw),
        days=len(by_day),
        dropped=skipped,
    )
    return by_day


def extract_scalar(
    raw: Mapping[str, str],
    metric: Union[Metric, str],
    series_key: str,
) -> Optional[str]:
    """Raw scalar value of a series from a pattern scan, or None if absent."""
    for key, value in raw.items():
        result = parse_entry(key, value, metric, series_key)
        if isinstance(result, ScalarKey):
            return result.value
    return None
