"""
Series Report Service - store reads plus reconstruction for one series key.

The three store reads (cases scan, deaths scan, travel note) address disjoint
key prefixes and are issued concurrently. A failed read becomes "no data" for
that part of the report; the engine is never called with partial input.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Mapping, Optional, TypeVar

import structlog

from casetrend.engine.countries import COUNTRIES_BY_KEY, country_name
from casetrend.engine.errors import ParseError, SeriesParseError
from casetrend.engine.extractor import extract_scalar
from casetrend.engine.key_parser import (
    key_prefix,
    normalize_series_key,
    parse_number,
    scan_pattern,
)
from casetrend.engine.reconstruction import reconstruct_with_trend
from casetrend.models.enums import Metric, ParsePolicy, TrendBasis
from casetrend.models.keys import Number
from casetrend.models.series import SeriesReport, SeriesTotals, TrendComparison
from casetrend.storage.base import CounterStore, StorageError
from casetrend.utils.clock import Clock, utc_now_ms
from casetrend.utils.logging import series_context

logger = structlog.get_logger()

T = TypeVar("T")


def _parse_total(raw: Optional[str]) -> Optional[Number]:
    if raw is None:
        return None
    try:
        return parse_number(raw)
    except ParseError:
        return None


class SeriesReportService:
    """
    Builds SeriesReport objects from the counter store.

    Attributes:
        store: Counter store to read from
        clock: Callable returning the current time in epoch milliseconds
        policy: Parse policy for non-numeric daily values
        trend_basis: Series the trend comparator runs on
        max_workers: Threads used for the concurrent store reads
        registry: Series key -> display name of every known series

    Example:
        >>> service = SeriesReportService(store=get_store())
        >>> report = service.build_report("france")
        >>> report.trend_summary
    """

    def __init__(
        self,
        store: CounterStore,
        clock: Clock = utc_now_ms,
        policy: ParsePolicy = ParsePolicy.STRICT,
        trend_basis: TrendBasis = TrendBasis.TRIMMED,
        max_workers: int = 3,
        registry: Optional[Mapping[str, str]] = None,
    ):
        self.store = store
        self.clock = clock
        self.policy = ParsePolicy(policy)
        self.trend_basis = TrendBasis(trend_basis)
        self.max_workers = max_workers
        self.registry = COUNTRIES_BY_KEY if registry is None else registry
        self.logger = structlog.get_logger()

    def build_report(self, series_key: str) -> SeriesReport:
        """
        Read, reconstruct and compare one series.

        Args:
            series_key: Requested key or display name ("France", "united-kingdom")

        Returns:
            SeriesReport; `series` and `trend` are None when there is no data
            or the data was rejected as corrupt

        Raises:
            InvalidSeriesKeyError: If the key cannot address a series
            UnknownSeriesKeyError: If the key names no known country; the
                store is not read
        """
        key = normalize_series_key(series_key)
        name = country_name(key, self.registry)
        with series_context(key):
            return self._build(key, name)

    def _build(self, key: str, name: str) -> SeriesReport:
        now = self.clock()

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            cases_future = pool.submit(
                self._read, {}, self.store.get_all_by_pattern, scan_pattern(Metric.CASES, key)
            )
            deaths_future = pool.submit(
                self._read, {}, self.store.get_all_by_pattern, scan_pattern(Metric.DEATHS, key)
            )
            travel_future = pool.submit(
                self._read, None, self.store.get, key_prefix(Metric.TRAVEL, key)
            )
            cases_raw = cases_future.result()
            deaths_raw = deaths_future.result()
            travel = travel_future.result()

        report = SeriesReport(
            series_key=key,
            display_name=name,
            generated_at=now,
            totals=SeriesTotals(
                total_cases=_parse_total(extract_scalar(cases_raw, Metric.CASES, key)),
                total_deaths=_parse_total(extract_scalar(deaths_raw, Metric.DEATHS, key)),
            ),
            travel_restrictions=travel or None,
        )

        try:
            result = reconstruct_with_trend(
                key, cases_raw, deaths_raw, now, self.policy, self.trend_basis
            )
        except SeriesParseError as e:
            self.logger.error(
                "series_parse_failed",
                metric=e.metric,
                key=e.key,
            )
            report.errors.append(str(e))
            return report

        report.series = result.series
        report.trend = result.trend
        report.trend_summary = self._summarize(result.trend, report.display_name)

        self.logger.info(
            "series_report_built",
            points=len(result.series),
            has_trend=result.trend is not None,
        )
        return report

    def compare(self, series_key: str) -> Optional[TrendComparison]:
        """Trend comparison for one series, None when absent."""
        return self.build_report(series_key).trend

    @staticmethod
    def _summarize(trend: Optional[TrendComparison], name: str) -> Optional[str]:
        if trend is None:
            return None
        return trend.describe(name)

    def _read(self, default: T, read: Callable[[str], T], key: str) -> T:
        """Run one store read, mapping a storage failure to `default`."""
        try:
            return read(key)
        except StorageError as e:
            self.logger.warning("store_read_failed", key=key, error=str(e))
            return default
