# ipl_live/page_fetcher.py
from __future__ import annotations

import logging
from contextlib import ExitStack
from typing import Optional

import requests
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from ipl_live.config import (
    HTTP_TIMEOUT_SECONDS,
    IPL_POINTS_TABLE_SELECTOR,
    IPL_POINTS_TABLE_URL,
    NAVIGATION_TIMEOUT_MS,
    SCRAPER_USER_AGENT,
    SELECTOR_TIMEOUT_MS,
    SETTLE_DELAY_MS,
)
from ipl_live.errors import ElementNotFound, NavigationTimeout, NetworkError
from ipl_live.points_table import require_table

logger = logging.getLogger(__name__)

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


def fetch_rendered_html(
    url: str = IPL_POINTS_TABLE_URL,
    selector: str = IPL_POINTS_TABLE_SELECTOR,
    *,
    user_agent: str = SCRAPER_USER_AGENT,
    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    selector_timeout_ms: int = SELECTOR_TIMEOUT_MS,
    settle_delay_ms: int = SETTLE_DELAY_MS,
) -> str:
    """
    Render the points table page in headless Chromium and return the full DOM markup.

    Steps:
      1) fresh browser + context with a desktop user agent
      2) goto(url) until network idle            -> NavigationTimeout
      3) wait for the standings table selector   -> ElementNotFound
      4) fixed settle delay for late client-side rendering
      5) page.content()

    The browser is closed on every exit path.
    """
    with ExitStack() as stack:
        # Driver start-up and browser launch fail the same way: no session to scrape with
        try:
            p = stack.enter_context(sync_playwright())
            browser = p.chromium.launch(headless=True, args=BROWSER_ARGS)
        except (PlaywrightError, OSError) as e:
            raise NetworkError(f"Browser start failed: {e}") from e
        stack.callback(browser.close)

        try:
            context = browser.new_context(user_agent=user_agent)
            page = context.new_page()

            logger.info("Navigating to %s", url)
            try:
                page.goto(url, wait_until="networkidle", timeout=navigation_timeout_ms)
            except PlaywrightTimeoutError as e:
                raise NavigationTimeout(
                    f"Navigation to {url} did not settle within {navigation_timeout_ms} ms"
                ) from e

            try:
                page.wait_for_selector(selector, timeout=selector_timeout_ms)
            except PlaywrightTimeoutError as e:
                raise ElementNotFound(
                    f"Selector {selector!r} did not appear within {selector_timeout_ms} ms"
                ) from e

            if settle_delay_ms > 0:
                page.wait_for_timeout(settle_delay_ms)

            html = page.content()
            logger.info("Rendered %d chars from %s", len(html), url)
            return html

        except PlaywrightError as e:
            raise NetworkError(f"Browser session failed: {e}") from e


def fetch_static_html(
    url: str = IPL_POINTS_TABLE_URL,
    selector: str = IPL_POINTS_TABLE_SELECTOR,
    *,
    user_agent: str = SCRAPER_USER_AGENT,
    timeout: int = HTTP_TIMEOUT_SECONDS,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Plain GET variant (no JavaScript). Only useful when the table is server-rendered
    or a proxy pre-renders the page; otherwise it fails with ElementNotFound.
    """
    headers = {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-IN,en;q=0.9",
        "Connection": "keep-alive",
    }

    own_session = session is None
    s = session or requests.Session()
    try:
        r = s.get(url, timeout=timeout, headers=headers, allow_redirects=True)
        r.raise_for_status()
        html = r.text
    except requests.RequestException as e:
        raise NetworkError(f"GET {url} failed: {e}") from e
    finally:
        if own_session:
            s.close()

    require_table(html, selector)
    return html
