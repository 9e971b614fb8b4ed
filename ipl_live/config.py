# ipl_live/config.py
from __future__ import annotations

import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, str(default))
    try:
        return float(raw)
    except ValueError:
        return default


# -------------------------
# Scrape target (iplt20.com points table)
# -------------------------
IPL_POINTS_TABLE_URL: str = _get_env(
    "IPL_POINTS_TABLE_URL",
    "https://www.iplt20.com/points-table/men",
)

# Table body rendered client-side by the IPL site
IPL_POINTS_TABLE_SELECTOR: str = _get_env("IPL_POINTS_TABLE_SELECTOR", "#pointsdata")

# "browser" = headless Chromium (Playwright), "http" = plain GET (requests)
SCRAPE_FETCH_METHOD: str = _get_env("SCRAPE_FETCH_METHOD", "browser").lower()

SCRAPER_USER_AGENT: str = _get_env(
    "SCRAPER_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)


# -------------------------
# Browser timings (milliseconds, Playwright units)
# -------------------------
NAVIGATION_TIMEOUT_MS: int = _get_env_int("NAVIGATION_TIMEOUT_MS", 30_000)
SELECTOR_TIMEOUT_MS: int = _get_env_int("SELECTOR_TIMEOUT_MS", 15_000)
SETTLE_DELAY_MS: int = _get_env_int("SETTLE_DELAY_MS", 3_000)

# Plain GET variant
HTTP_TIMEOUT_SECONDS: int = _get_env_int("HTTP_TIMEOUT_SECONDS", 20)


# -------------------------
# Retry + cache
# -------------------------
SCRAPE_MAX_ATTEMPTS: int = _get_env_int("SCRAPE_MAX_ATTEMPTS", 3)
SCRAPE_RETRY_BASE_DELAY_SECONDS: float = _get_env_float("SCRAPE_RETRY_BASE_DELAY_SECONDS", 1.0)
SCRAPE_CACHE_TTL_SECONDS: int = _get_env_int("SCRAPE_CACHE_TTL_SECONDS", 300)


LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO").upper()

FETCH_METHODS = ("browser", "http")


def validate_config() -> None:
    if not IPL_POINTS_TABLE_URL.startswith("http"):
        raise RuntimeError("IPL_POINTS_TABLE_URL must start with http/https")

    if not IPL_POINTS_TABLE_SELECTOR:
        raise RuntimeError("IPL_POINTS_TABLE_SELECTOR must be non-empty")

    if SCRAPE_FETCH_METHOD not in FETCH_METHODS:
        raise RuntimeError(f"SCRAPE_FETCH_METHOD must be one of {FETCH_METHODS}, got {SCRAPE_FETCH_METHOD!r}")

    # Timeouts / TTL validation
    if NAVIGATION_TIMEOUT_MS <= 0 or SELECTOR_TIMEOUT_MS <= 0:
        raise RuntimeError("NAVIGATION_TIMEOUT_MS and SELECTOR_TIMEOUT_MS must be positive")

    if SETTLE_DELAY_MS < 0:
        raise RuntimeError("SETTLE_DELAY_MS must not be negative")

    if HTTP_TIMEOUT_SECONDS <= 0:
        raise RuntimeError("HTTP_TIMEOUT_SECONDS must be positive")

    if SCRAPE_MAX_ATTEMPTS <= 0:
        raise RuntimeError("SCRAPE_MAX_ATTEMPTS must be positive")

    if SCRAPE_RETRY_BASE_DELAY_SECONDS < 0:
        raise RuntimeError("SCRAPE_RETRY_BASE_DELAY_SECONDS must not be negative")

    if SCRAPE_CACHE_TTL_SECONDS <= 0:
        raise RuntimeError("SCRAPE_CACHE_TTL_SECONDS must be positive")
