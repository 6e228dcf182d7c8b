"""
Data storage layer - read-only access to the sparse counter store.

Counters are written by an external ingestion job; this package only reads.
"""

from functools import lru_cache

from casetrend.config import get_settings

from .base import CounterStore, StorageError
from .redis_storage import RedisCounterStore


@lru_cache
def get_store() -> CounterStore:
    """
    Get cached counter store instance (singleton).

    Returns:
        CounterStore implementation built from settings
    """
    settings = get_settings()
    return RedisCounterStore(
        url=settings.redis_url,
        socket_timeout=settings.redis_socket_timeout,
        scan_count=settings.redis_scan_count,
    )


__all__ = [
    "CounterStore",
    "RedisCounterStore",
    "StorageError",
    "get_store",
]
