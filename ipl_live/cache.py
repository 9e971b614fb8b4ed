# ipl_live/cache.py
from __future__ import annotations

import time
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class SnapshotCache(Generic[T]):
    """
    Single-slot in-memory TTL cache (sufficient for single-instance deploys).

    Holds the last successful scrape and when it was stored. No locking:
    concurrent readers may see the old or new payload, last writer wins.
    Refresh de-duplication lives in the scrape service, not here.
    """

    def __init__(self, ttl_seconds: float = 300, clock: Callable[[], float] = time.time) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._payload: Optional[T] = None
        self._fetched_at: float = 0.0
        # Bumped on every invalidate(); lets a slow refresh detect it was overtaken
        self.generation: int = 0

    def read(self) -> Optional[T]:
        """Payload if younger than the TTL, else None (stale or empty)."""
        if self._payload is None:
            return None
        if self._clock() - self._fetched_at >= self.ttl_seconds:
            return None
        return self._payload

    def write(self, payload: T, *, generation: Optional[int] = None) -> bool:
        """
        Store payload stamped with the current time.
        With `generation`, the write is dropped (returns False) if the cache
        was invalidated since that generation was read.
        """
        if generation is not None and generation != self.generation:
            return False
        self._payload = payload
        self._fetched_at = self._clock()
        return True

    def invalidate(self) -> None:
        self._payload = None
        self._fetched_at = 0.0
        self.generation += 1

    def age_seconds(self) -> Optional[float]:
        if self._payload is None:
            return None
        return max(0.0, self._clock() - self._fetched_at)

    def debug_snapshot(self) -> Dict[str, Any]:
        """
        Current slot state. Useful for debugging.
        """
        return {
            "cached": self.read() is not None,
            "age_seconds": self.age_seconds(),
            "ttl_seconds": self.ttl_seconds,
            "generation": self.generation,
        }
