"""
Series router.

Wired to:
- SeriesReportService for reconstruction and trend comparison
"""

from fastapi import APIRouter, Depends, HTTPException

from casetrend.engine.errors import InvalidSeriesKeyError
from casetrend.services import SeriesReportService, get_report_service
from casetrend.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


def _build(service: SeriesReportService, series_key: str):
    try:
        return service.build_report(series_key)
    except InvalidSeriesKeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{series_key}")
def get_series(
    series_key: str,
    service: SeriesReportService = Depends(get_report_service),
):
    """
    Get the reconstructed daily series, totals, trend and travel note.
    Known countries with no data return an empty report; unknown keys 404.
    """
    logger.info("series_request", series_key=series_key)
    report = _build(service, series_key)
    return {"success": True, "data": report.model_dump(mode="json")}


@router.get("/{series_key}/trend")
def get_series_trend(
    series_key: str,
    service: SeriesReportService = Depends(get_report_service),
):
    """
    Get only the 5-day vs previous 5-day comparison.
    `data` is null when fewer than 10 days are available.
    """
    logger.info("series_trend_request", series_key=series_key)
    report = _build(service, series_key)
    return {
        "success": True,
        "data": report.trend.model_dump(mode="json") if report.trend else None,
        "summary": report.trend_summary,
    }
