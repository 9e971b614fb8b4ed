"""
Page fetcher: browser session steps, error mapping and cleanup; plain GET variant.
"""

import pytest
import requests
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ipl_live.errors import ElementNotFound, NavigationTimeout, NetworkError
from ipl_live.page_fetcher import fetch_rendered_html, fetch_static_html

from tests.conftest import FakePage

pytestmark = pytest.mark.unit

URL = "https://www.iplt20.com/points-table/men"


class TestFetchRenderedHtml:

    def test_happy_path(self, fake_playwright, points_table_html):
        page = FakePage(html=points_table_html)
        pw = fake_playwright(page)

        html = fetch_rendered_html(URL, "#pointsdata", user_agent="UA/1.0")

        assert html == points_table_html
        assert pw.browser.closed is True
        assert pw.browser.user_agent == "UA/1.0"
        assert pw.launch_kwargs["headless"] is True

    def test_steps_and_timeouts(self, fake_playwright):
        page = FakePage(html="<html></html>")
        fake_playwright(page)

        fetch_rendered_html(
            URL, "#pointsdata",
            navigation_timeout_ms=30_000, selector_timeout_ms=15_000, settle_delay_ms=3_000,
        )

        assert page.calls == [
            ("goto", URL, "networkidle", 30_000),
            ("wait_for_selector", "#pointsdata", 15_000),
            ("wait_for_timeout", 3_000),
            ("content",),
        ]

    def test_no_settle_delay_when_zero(self, fake_playwright):
        page = FakePage(html="<html></html>")
        fake_playwright(page)

        fetch_rendered_html(URL, "#pointsdata", settle_delay_ms=0)

        assert ("wait_for_timeout", 0) not in page.calls

    def test_navigation_timeout(self, fake_playwright):
        page = FakePage(goto_error=PlaywrightTimeoutError("Timeout 30000ms exceeded"))
        pw = fake_playwright(page)

        with pytest.raises(NavigationTimeout):
            fetch_rendered_html(URL, "#pointsdata")

        assert pw.browser.closed is True
        assert not any(c[0] == "wait_for_selector" for c in page.calls)

    def test_selector_timeout(self, fake_playwright):
        page = FakePage(selector_error=PlaywrightTimeoutError("Timeout 15000ms exceeded"))
        pw = fake_playwright(page)

        with pytest.raises(ElementNotFound):
            fetch_rendered_html(URL, "#pointsdata")

        assert pw.browser.closed is True
        assert ("content",) not in page.calls

    def test_other_browser_errors_are_network_errors(self, fake_playwright):
        page = FakePage(goto_error=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))
        pw = fake_playwright(page)

        with pytest.raises(NetworkError):
            fetch_rendered_html(URL, "#pointsdata")

        assert pw.browser.closed is True

    def test_driver_start_failure_is_network_error(self, monkeypatch):
        from ipl_live import page_fetcher

        class BrokenDriver:
            def __enter__(self):
                raise PlaywrightError("Playwright driver not found")

            def __exit__(self, *exc):
                return False

        monkeypatch.setattr(page_fetcher, "sync_playwright", BrokenDriver)

        with pytest.raises(NetworkError, match="Browser start failed"):
            fetch_rendered_html(URL, "#pointsdata")

    def test_launch_failure_is_network_error(self, fake_playwright):
        pw = fake_playwright(FakePage())

        def no_chromium(**kwargs):
            raise PlaywrightError("Executable doesn't exist")

        pw.launch = no_chromium

        with pytest.raises(NetworkError, match="Browser start failed"):
            fetch_rendered_html(URL, "#pointsdata")
        assert pw.browser.closed is False


class _FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class _FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


class TestFetchStaticHtml:

    def test_returns_markup(self, points_table_html):
        session = _FakeSession(_FakeResponse(points_table_html))

        html = fetch_static_html(URL, "#pointsdata", user_agent="UA/1.0", session=session)

        assert html == points_table_html
        url, kwargs = session.requests[0]
        assert url == URL
        assert kwargs["headers"]["User-Agent"] == "UA/1.0"
        assert kwargs["timeout"] > 0

    def test_connection_error(self):
        session = _FakeSession(error=requests.ConnectionError("refused"))
        with pytest.raises(NetworkError):
            fetch_static_html(URL, "#pointsdata", session=session)

    def test_http_error_status(self):
        session = _FakeSession(_FakeResponse("blocked", status_code=403))
        with pytest.raises(NetworkError):
            fetch_static_html(URL, "#pointsdata", session=session)

    def test_client_rendered_shell_has_no_table(self):
        session = _FakeSession(_FakeResponse('<html><body><div id="app"></div></body></html>'))
        with pytest.raises(ElementNotFound):
            fetch_static_html(URL, "#pointsdata", session=session)
