"""Utility modules for logging, clocks, and common helpers."""

from casetrend.utils.clock import MS_PER_DAY, utc_now_ms
from casetrend.utils.logging import configure_logging, get_logger, series_context

__all__ = ["MS_PER_DAY", "configure_logging", "get_logger", "series_context", "utc_now_ms"]
