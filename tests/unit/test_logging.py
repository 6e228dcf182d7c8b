"""
Unit tests for the structlog helpers.
"""

import structlog

from casetrend.utils.logging import add_day_dates, series_context
from tests.conftest import D0, DAY


class TestAddDayDates:
    """Test the epoch-day processor."""

    def test_add_day_dates_for_day_fields(self):
        event = add_day_dates(None, "info", {"event": "tail_trimmed", "day": D0 + 4 * DAY})

        assert event["day_date"] == "2020-03-05"
        assert event["day"] == D0 + 4 * DAY

    def test_add_day_dates_for_series_start(self):
        event = add_day_dates(None, "debug", {"event": "series_densified", "start": D0})
        assert event["start_date"] == "2020-03-01"

    def test_add_day_dates_ignores_other_values(self):
        event = add_day_dates(None, "info", {"event": "x", "day": None, "start": True})

        assert "day_date" not in event
        assert "start_date" not in event


class TestSeriesContext:
    """Test binding of the series key to log events."""

    def test_series_context_binds_and_restores(self):
        structlog.contextvars.clear_contextvars()

        with series_context("réunion"):
            assert structlog.contextvars.get_contextvars()["series_key"] == "réunion"

        assert "series_key" not in structlog.contextvars.get_contextvars()

    def test_series_context_reaches_log_events(self):
        with series_context("france"):
            event = structlog.contextvars.merge_contextvars(
                None, "info", {"event": "series_report_built", "points": 9}
            )

        assert event["series_key"] == "france"
        assert event["points"] == 9
