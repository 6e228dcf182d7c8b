"""API routers for all endpoints."""

from casetrend.routers import series, system

__all__ = [
    "series",
    "system",
]
