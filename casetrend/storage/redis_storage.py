"""
Redis implementation of the counter store.

Pattern reads use SCAN (never KEYS) so a large keyspace does not block the
server, followed by a single MGET for the values. Bytes that are not valid
UTF-8 decode to U+FFFD, and a corrupt value is handled by the
parse policy.
"""

from typing import Any, Optional

import redis
import structlog

from .base import CounterStore, StorageError

logger = structlog.get_logger(__name__)


class RedisCounterStore(CounterStore):
    """
    Redis-backed counter store.

    Attributes:
        client: redis-py client with decode_responses enabled
        scan_count: COUNT hint passed to SCAN
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        socket_timeout: float = 5.0,
        scan_count: int = 500,
        client: Optional[Any] = None,
    ):
        """
        Initialize the Redis counter store.

        Args:
            url: Redis connection URL
            socket_timeout: Socket timeout in seconds for every command
            scan_count: SCAN batch size hint
            client: Pre-built client (used by tests); built from `url` when None
        """
        self.scan_count = scan_count
        self.client = client or redis.Redis.from_url(
            url,
            decode_responses=True,
            encoding_errors="replace",
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        logger.info("redis_store_initialized", url=url if client is None else "injected")

    def get_all_by_pattern(self, pattern: str) -> dict[str, str]:
        try:
            keys = list(self.client.scan_iter(match=pattern, count=self.scan_count))
            if not keys:
                return {}
            values = self.client.mget(keys)
        except (redis.RedisError, UnicodeDecodeError) as e:
            logger.error("redis_pattern_read_failed", pattern=pattern, error=str(e))
            raise StorageError(f"Failed to read pattern {pattern!r}: {e}") from e

        # A key can expire between SCAN and MGET
        result = {k: v for k, v in zip(keys, values) if v is not None}
        logger.debug("redis_pattern_read", pattern=pattern, keys=len(result))
        return result

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(key)
        except (redis.RedisError, UnicodeDecodeError) as e:
            logger.error("redis_get_failed", key=key, error=str(e))
            raise StorageError(f"Failed to read key {key!r}: {e}") from e

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError as e:
            raise StorageError(f"Redis ping failed: {e}") from e
