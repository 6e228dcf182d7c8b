"""
Abstract read interface for the sparse counter store.

The store is an external collaborator populated by a separate ingestion job.
This service only reads from it, through the narrow contract defined here, so
the Redis backend can be swapped for an in-memory one in tests without
changing engine or service code.

Key layout (must stay bit-exact for the population job):
- `<metric>_<seriesKey>_<millis>`: daily snapshot, millis is 13 ASCII digits
- `<metric>_<seriesKey>`: scalar value (running total or free text)
"""

from abc import ABC, abstractmethod
from typing import Optional


class StorageError(Exception):
    """Base exception for all storage operation failures."""

    pass


class CounterStore(ABC):
    """
    Abstract base class for counter store implementations.

    Implementations should ensure:
    - Reads are side-effect free and safe to issue concurrently
    - Connection failures surface as StorageError, never as partial results
    """

    @abstractmethod
    def get_all_by_pattern(self, pattern: str) -> dict[str, str]:
        """
        Read every key matching a prefix-style glob pattern.

        Args:
            pattern: Glob pattern, e.g. "cases_france*"

        Returns:
            Mapping of key to raw string value, in no defined order. Empty
            mapping when nothing matches.

        Raises:
            StorageError: If the read fails
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read a single scalar value.

        Args:
            key: Exact store key, e.g. "travel_france"

        Returns:
            The raw string value, or None when the key is not set

        Raises:
            StorageError: If the read fails
        """
        pass

    @abstractmethod
    def ping(self) -> bool:
        """
        Check connectivity to the store.

        Returns:
            True when the store answered

        Raises:
            StorageError: If the store is unreachable
        """
        pass
