"""Service layer wiring the counter store to the reconstruction engine."""

from functools import lru_cache

from casetrend.config import get_settings
from casetrend.storage import get_store

from .report_service import SeriesReportService


@lru_cache
def get_report_service() -> SeriesReportService:
    """Cached SeriesReportService built from settings."""
    settings = get_settings()
    return SeriesReportService(
        store=get_store(),
        policy=settings.parse_policy,
        trend_basis=settings.trend_basis,
        max_workers=settings.store_read_workers,
    )


__all__ = ["SeriesReportService", "get_report_service"]
