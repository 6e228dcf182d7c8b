"""
System health router.

Wired to:
- CounterStore for connectivity checks
- Settings for configuration
"""

import time

from fastapi import APIRouter, Depends

from casetrend.config import get_settings
from casetrend.storage import CounterStore, StorageError, get_store
from casetrend.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()

# Track startup time for uptime calculation
_startup_time = time.time()


@router.get("/health")
def system_health(store: CounterStore = Depends(get_store)):
    """
    Get system health status.
    Pings the counter store and reports actual service health.
    """
    settings = get_settings()
    uptime = time.time() - _startup_time

    store_status = "healthy"
    try:
        store.ping()
    except StorageError as e:
        logger.warning("store_health_check_failed", error=str(e))
        store_status = f"unhealthy: {str(e)}"

    return {
        "success": True,
        "data": {
            "status": "healthy" if store_status == "healthy" else "degraded",
            "version": "0.1.0",
            "uptime_seconds": round(uptime, 1),
            "store": store_status,
            "parse_policy": settings.parse_policy,
            "trend_basis": settings.trend_basis,
        },
    }
