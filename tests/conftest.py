"""
Pytest configuration and shared fixtures for the CaseTrend test suite.

Provides raw store data factories, an in-memory counter store with failure
injection, a fixed clock, and a FastAPI test client wired to the mock store.
"""

import os
import re
from typing import Iterable, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

# Set testing environment BEFORE importing app
os.environ["TESTING"] = "true"
os.environ["DEV_MODE"] = "true"
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from casetrend.engine.key_parser import daily_key, key_prefix
from casetrend.models.enums import Metric, ParsePolicy, TrendBasis
from casetrend.services.report_service import SeriesReportService
from casetrend.storage.base import CounterStore, StorageError
from casetrend.utils.clock import MS_PER_DAY, fixed_clock

DAY = MS_PER_DAY

# 2020-03-01T00:00:00Z
D0 = 1583020800000


# ---------------------------------------------------------------------------
# Raw store data factories
# ---------------------------------------------------------------------------

def make_raw_series(
    metric: Metric,
    series_key: str,
    values: Sequence[Optional[float]],
    start: int = D0,
    total: Optional[str] = None,
) -> dict[str, str]:
    """
    Factory for the raw mapping a pattern scan returns for one metric.

    `values[i]` is stored under day `start + i * DAY`; None leaves a gap.
    `total` adds the scalar key of the series.
    """
    raw = {
        daily_key(metric, series_key, start + i * DAY): str(v)
        for i, v in enumerate(values)
        if v is not None
    }
    if total is not None:
        raw[key_prefix(metric, series_key)] = total
    return raw


def make_store_data(
    series_key: str,
    cases: Sequence[Optional[float]],
    deaths: Optional[Sequence[Optional[float]]] = None,
    start: int = D0,
    total_cases: Optional[str] = None,
    total_deaths: Optional[str] = None,
    travel: Optional[str] = None,
) -> dict[str, str]:
    """Factory for the complete store contents of one series."""
    data = make_raw_series(Metric.CASES, series_key, cases, start, total_cases)
    data.update(
        make_raw_series(Metric.DEATHS, series_key, deaths or [], start, total_deaths)
    )
    if travel is not None:
        data[key_prefix(Metric.TRAVEL, series_key)] = travel
    return data


# ---------------------------------------------------------------------------
# Mock store - reusable mock for pure unit tests
# ---------------------------------------------------------------------------

class MockCounterStore(CounterStore):
    """
    In-memory CounterStore for unit and integration tests.

    Patterns are escaped prefix globs ending in "*", as built by scan_pattern.
    Reads listed in `failing` raise StorageError.
    """

    def __init__(self, data: Optional[dict[str, str]] = None, failing: Iterable[str] = ()):
        self.data: dict[str, str] = dict(data or {})
        self.failing = set(failing)
        self.calls: list[tuple[str, str]] = []
        self.healthy = True

    def get_all_by_pattern(self, pattern: str) -> dict[str, str]:
        self.calls.append(("get_all_by_pattern", pattern))
        if pattern in self.failing:
            raise StorageError(f"simulated failure for {pattern}")
        prefix = re.sub(r"\\(.)", r"\1", pattern[:-1])
        return {k: v for k, v in self.data.items() if k.startswith(prefix)}

    def get(self, key: str) -> Optional[str]:
        self.calls.append(("get", key))
        if key in self.failing:
            raise StorageError(f"simulated failure for {key}")
        return self.data.get(key)

    def ping(self) -> bool:
        if not self.healthy:
            raise StorageError("simulated outage")
        return True


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_store():
    """Fresh MockCounterStore instance for each test."""
    return MockCounterStore()


@pytest.fixture
def fixed_now():
    """Clock value ten days after D0."""
    return D0 + 10 * DAY


@pytest.fixture
def make_service(mock_store, fixed_now):
    """Factory for SeriesReportService instances on the mock store."""

    def _make(
        policy: ParsePolicy = ParsePolicy.STRICT,
        trend_basis: TrendBasis = TrendBasis.TRIMMED,
        now: Optional[int] = None,
    ) -> SeriesReportService:
        return SeriesReportService(
            store=mock_store,
            clock=fixed_clock(now if now is not None else fixed_now),
            policy=policy,
            trend_basis=trend_basis,
        )

    return _make


@pytest.fixture
def client(mock_store, make_service):
    """FastAPI test client wired to the mock store and a fixed clock."""
    from casetrend.main import app
    from casetrend.services import get_report_service
    from casetrend.storage import get_store

    service = make_service()
    app.dependency_overrides[get_report_service] = lambda: service
    app.dependency_overrides[get_store] = lambda: mock_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
