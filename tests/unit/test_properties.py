"""
Property-based tests using Hypothesis for the reconstruction engine.

These tests verify the invariants of densification, trimming and trend
comparison across arbitrary sparse inputs and clock values.
"""

import hypothesis.strategies as st
from hypothesis import given, settings

from casetrend.engine.densifier import densify
from casetrend.engine.reconstruction import reconstruct
from casetrend.engine.trend import compare_trend
from casetrend.engine.trimmer import trim_incomplete_tail
from casetrend.models.enums import Metric, TrendDirection
from tests.conftest import D0, DAY

# Sparse day offsets (in days from D0) mapped to counts
sparse_days = st.dictionaries(
    keys=st.integers(min_value=0, max_value=60),
    values=st.integers(min_value=0, max_value=100_000),
    max_size=30,
)
now_offsets = st.integers(min_value=0, max_value=70 * DAY)


def _by_day(offsets: dict[int, int]) -> dict[int, int]:
    return {D0 + d * DAY: v for d, v in offsets.items()}


def _raw(metric: Metric, offsets: dict[int, int]) -> dict[str, str]:
    return {f"{metric.value}_us_{D0 + d * DAY}": str(v) for d, v in offsets.items()}


# =============================================================================
# Densifier Property Tests
# =============================================================================


@given(cases=sparse_days, deaths=sparse_days, now_offset=now_offsets)
@settings(max_examples=100)
def test_prop_dense_series_has_daily_spacing(cases, deaths, now_offset):
    """
    Invariant: adjacent days of a dense series are exactly one day apart.
    """
    series = densify(_by_day(cases), _by_day(deaths), now=D0 + now_offset)

    for a, b in zip(series.days, series.days[1:]):
        assert b - a == DAY


@given(cases=sparse_days, deaths=sparse_days, now_offset=now_offsets)
@settings(max_examples=100)
def test_prop_missing_days_are_zero_filled(cases, deaths, now_offset):
    """
    Invariant: a day with a raw entry keeps its value, every other day is 0.
    """
    case_map, death_map = _by_day(cases), _by_day(deaths)
    series = densify(case_map, death_map, now=D0 + now_offset)

    for day, c, d in zip(series.days, series.case_values, series.death_values):
        assert c == case_map.get(day, 0)
        assert d == death_map.get(day, 0)


@given(cases=sparse_days, deaths=sparse_days, now_offset=now_offsets)
@settings(max_examples=100)
def test_prop_dense_series_spans_first_observation_to_now(cases, deaths, now_offset):
    """
    Invariant: the series starts at the earliest observation and its last day
    is the last grid day before now.
    """
    now = D0 + now_offset
    series = densify(_by_day(cases), _by_day(deaths), now=now)

    if not cases and not deaths:
        assert series.is_empty
        return
    start = D0 + min([*cases, *deaths]) * DAY
    if start >= now:
        assert series.is_empty
        return
    assert series.days[0] == start
    assert series.days[-1] < now <= series.days[-1] + DAY


# =============================================================================
# Trimmer Property Tests
# =============================================================================


@given(cases=sparse_days, now_offset=now_offsets)
@settings(max_examples=100)
def test_prop_trim_removes_at_most_one_aligned_point(cases, now_offset):
    """
    Invariant: trimming is a no-op when the last case value is nonzero and
    removes exactly one point from every list when it is zero.
    """
    dense = densify(_by_day(cases), {}, now=D0 + now_offset)
    trimmed = trim_incomplete_tail(dense)

    if dense.is_empty or dense.case_values[-1] != 0:
        assert trimmed.case_values == dense.case_values
        assert not trimmed.trimmed
    else:
        assert len(trimmed) == len(dense) - 1
        assert trimmed.case_values == dense.case_values[:-1]
        assert trimmed.death_values == dense.death_values[:-1]
        assert trimmed.labels == dense.labels[:-1]
    assert len(trimmed.labels) == len(trimmed.case_values) == len(trimmed.death_values)


# =============================================================================
# Reconstruction Property Tests
# =============================================================================


@given(cases=sparse_days, deaths=sparse_days, now_offset=now_offsets)
@settings(max_examples=50)
def test_prop_reconstruct_is_deterministic(cases, deaths, now_offset):
    """
    Invariant: fixed raw mappings and a fixed clock give identical output.
    """
    now = D0 + now_offset
    cases_raw, deaths_raw = _raw(Metric.CASES, cases), _raw(Metric.DEATHS, deaths)

    assert reconstruct("us", cases_raw, deaths_raw, now) == reconstruct(
        "us", cases_raw, deaths_raw, now
    )


# =============================================================================
# Trend Comparator Property Tests
# =============================================================================


@given(values=st.lists(st.integers(min_value=0, max_value=10_000), max_size=9))
@settings(max_examples=50)
def test_prop_trend_absent_below_ten_points(values):
    """
    Invariant: fewer than 10 points never produce a comparison.
    """
    assert compare_trend(values) is None


@given(values=st.lists(st.integers(min_value=0, max_value=10_000), min_size=10, max_size=40))
@settings(max_examples=100)
def test_prop_trend_direction_matches_window_sums(values):
    """
    Invariant: direction agrees with the two non-overlapping window sums and
    only the last 10 values matter.
    """
    trend = compare_trend(values)

    assert trend.current_window_sum == sum(values[-5:])
    assert trend.previous_window_sum == sum(values[-10:-5])
    assert trend.difference == abs(trend.current_window_sum - trend.previous_window_sum)
    if trend.current_window_sum > trend.previous_window_sum:
        assert trend.direction == TrendDirection.MORE
    elif trend.current_window_sum < trend.previous_window_sum:
        assert trend.direction == TrendDirection.FEWER
    else:
        assert trend.direction == TrendDirection.SAME
    assert compare_trend([999_999] + values) == trend
