# ipl_live/errors.py
from __future__ import annotations


class ScrapeError(Exception):
    """Base class for failures on the fetch/parse path (retried, then degraded to fallback)."""
    pass


class NavigationTimeout(ScrapeError):
    """Page did not reach network idle within the navigation timeout."""
    pass


class ElementNotFound(ScrapeError):
    """Standings table selector never appeared in the page."""
    pass


class NetworkError(ScrapeError):
    """Transport-level failure (DNS, connection reset, non-2xx status, browser crash)."""
    pass


class ParseAnomaly(ScrapeError):
    """
    A standings row was shorter than expected.
    Only raised when the extractor runs with strict=True; by default such rows are skipped.
    """
    pass
