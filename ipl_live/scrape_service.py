# ipl_live/scrape_service.py
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from ipl_live.cache import SnapshotCache
from ipl_live.config import (
    FETCH_METHODS,
    IPL_POINTS_TABLE_SELECTOR,
    IPL_POINTS_TABLE_URL,
    SCRAPE_FETCH_METHOD,
    SCRAPE_MAX_ATTEMPTS,
    SCRAPE_RETRY_BASE_DELAY_SECONDS,
)
from ipl_live.fallback import (
    create_mock_live_match,
    create_mock_points_table,
    create_mock_recent_matches,
    create_mock_result,
    create_mock_upcoming_matches,
    utc_now_iso,
)
from ipl_live.models import ScrapeResult
from ipl_live.page_fetcher import fetch_rendered_html, fetch_static_html
from ipl_live.points_table import parse_points_table
from ipl_live.retry import RetryOutcome, retry_with_fallback

logger = logging.getLogger(__name__)

FetchHtml = Callable[[], str]


@dataclass(frozen=True)
class Snapshot:
    """What the cache slot holds: serialized payload plus how it was produced."""
    data: Dict[str, Any]
    method: str
    degraded: bool = False
    attempts: int = 1


def default_fetcher(method: str, url: str = IPL_POINTS_TABLE_URL, selector: str = IPL_POINTS_TABLE_SELECTOR) -> FetchHtml:
    if method == "browser":
        return lambda: fetch_rendered_html(url, selector)
    if method == "http":
        return lambda: fetch_static_html(url, selector)
    raise ValueError(f"Unknown fetch method: {method} (expected one of {FETCH_METHODS})")


class ScrapeService:
    """
    Fetch -> parse -> cache pipeline behind /api/scrape.

    Cache misses are single-flight: one thread refreshes while concurrent
    callers wait on the lock and then read the fresh slot.
    """

    def __init__(
        self,
        cache: SnapshotCache[Snapshot],
        *,
        method: str = SCRAPE_FETCH_METHOD,
        fetch_html: Optional[FetchHtml] = None,
        selector: str = IPL_POINTS_TABLE_SELECTOR,
        max_attempts: int = SCRAPE_MAX_ATTEMPTS,
        base_delay: float = SCRAPE_RETRY_BASE_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.cache = cache
        self.method = method
        self.selector = selector
        self.fetch_html = fetch_html or default_fetcher(method, selector=selector)
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self._sleep = sleep
        self._refresh_lock = threading.Lock()

    def scrape_once(self) -> ScrapeResult:
        """
        One fetch + parse. Raises ScrapeError subclasses on fetch failure.
        Match cards are always static; an empty parse falls back to the mock table.
        """
        html = self.fetch_html()
        grid, records = parse_points_table(html, self.selector)

        if not records:
            logger.warning("No standings rows parsed (%d raw rows); using fallback table", len(grid))

        return ScrapeResult(
            live_match=create_mock_live_match(),
            upcoming_matches=create_mock_upcoming_matches(),
            points_table=records or create_mock_points_table(),
            points_table_raw_data=grid,
            recent_matches=create_mock_recent_matches(),
            last_updated=utc_now_iso(),
            degraded=not records,
        )

    def refresh(self) -> Snapshot:
        """
        Run the pipeline through the retry wrapper and overwrite the cache.

        If the cache is invalidated while the scrape is running, the result is
        still returned to this caller but not cached, so requests arriving after
        the invalidation scrape again.
        """
        generation = self.cache.generation
        outcome: RetryOutcome[ScrapeResult] = retry_with_fallback(
            self.scrape_once,
            create_mock_result,
            max_attempts=self.max_attempts,
            base_delay=self.base_delay,
            backoff="exponential",
            sleep=self._sleep,
        )
        result = outcome.value
        snapshot = Snapshot(
            data=result.to_dict(),
            method=self.method,
            degraded=outcome.degraded or result.degraded,
            attempts=outcome.attempts,
        )
        if not self.cache.write(snapshot, generation=generation):
            logger.info("Cache invalidated during scrape; result not cached")
            return snapshot

        logger.info(
            "Cache refreshed via %s (attempts=%d, teams=%d, degraded=%s)",
            self.method, snapshot.attempts, len(result.points_table), snapshot.degraded,
        )
        if outcome.error:
            logger.warning("Serving fallback data after %d attempts: %s", snapshot.attempts, outcome.error)
        return snapshot

    def get_snapshot(self) -> Tuple[Snapshot, bool]:
        """Returns (snapshot, served_from_cache)."""
        cached = self.cache.read()
        if cached is not None:
            logger.debug("Cache hit")
            return cached, True

        with self._refresh_lock:
            # Another request may have refreshed while we waited; a refresh
            # overtaken by invalidate() never writes, so this slot is current
            cached = self.cache.read()
            if cached is not None:
                return cached, True

            logger.info("Cache miss, scraping %s", self.method)
            return self.refresh(), False

    def invalidate(self) -> None:
        self.cache.invalidate()
        logger.info("Cache invalidated")
