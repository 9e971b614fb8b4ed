"""
Shared fixtures: iplt20-style table markup, a controllable clock and a
stand-in for Playwright's sync API (no real browser in tests).
"""
from contextlib import nullcontext

import pytest

TEAMS = [
    ("1", "Kolkata Knight Riders KKR", "14", "9", "3", "2", "+1.428", "2389/264.2", "2218/269.2", "20", "WLWWW"),
    ("2", "Sunrisers Hyderabad SRH", "14", "8", "5", "1", "+0.414", "2605/258.5", "2541/264.2", "17", "WLWLW"),
    ("3", "Rajasthan Royals RR", "14", "8", "5", "1", "+0.273", "2334/259.3", "2306/261.1", "17", "LLLLN"),
    ("4", "Royal Challengers Bengaluru RCB", "14", "7", "7", "0", "+0.459", "2758/266.5", "2612/267.2", "14", "WWWWW"),
    ("5", "Chennai Super Kings CSK", "14", "7", "7", "0", "+0.392", "2524/273.4", "2415/271.3", "14", "LWLWL"),
    ("6", "Delhi Capitals DC", "14", "7", "7", "0", "-0.377", "2573/275.1", "2670/271.0", "14", "LWWLW"),
    ("7", "Lucknow Super Giants LSG", "14", "7", "7", "0", "-0.667", "2483/276.2", "2618/275.0", "14", "WLLLW"),
    ("8", "Gujarat Titans GT", "14", "5", "7", "2", "-1.063", "2040/236.5", "2167/230.1", "12", "NNWLW"),
]


def _form_cell(form: str) -> str:
    flags = "".join(f'<span class="rf {c.lower()}">{c}</span>' for c in form)
    return f'<td><div class="ih-pt-fb">{flags}</div></td>'


def make_row(pos, team, p, w, l, nr, nrr, runs_for, runs_against, pts, form) -> str:
    return (
        "<tr>"
        f"<td>{pos}</td>"
        '<td><img src="logo.png" alt=""></td>'
        f'<td><div class="ih-pt-cont"><img src="t.png"><h2 class="ih-pt-tbl">{team}</h2></div></td>'
        f"<td>{p}</td><td>{w}</td><td>{l}</td><td>{nr}</td>"
        f"<td>{nrr}</td><td>{runs_for}</td><td>{runs_against}</td>"
        f'<td class="ih-pt-cont-pts">{pts}</td>'
        f"{_form_cell(form)}"
        "</tr>"
    )


def make_page(rows_html: str) -> str:
    return (
        "<html><head><title>Points Table</title></head><body>"
        '<table class="ih-td-tab">'
        "<thead><tr><th>POS</th><th></th><th>TEAM</th><th>P</th><th>W</th><th>L</th><th>NR</th>"
        "<th>NRR</th><th>FOR</th><th>AGAINST</th><th>PTS</th><th>RECENT FORM</th></tr></thead>"
        f'<tbody id="pointsdata">{rows_html}</tbody>'
        "</table></body></html>"
    )


@pytest.fixture
def points_table_html() -> str:
    """Eight full team rows, as rendered by the live site."""
    return make_page("".join(make_row(*t) for t in TEAMS))


@pytest.fixture
def mixed_rows_html() -> str:
    """One full row, one short row, one blank row and one full row with junk numbers."""
    rows = (
        make_row(*TEAMS[0])
        + "<tr><td>Qualified</td><td>Top 4</td></tr>"
        + "<tr><td> </td><td></td></tr>"
        + "<tr><td>-</td><td></td><td></td><td>x</td><td>9</td><td>?</td><td></td><td></td>"
          "<td></td><td>n/a</td><td></td></tr>"
    )
    return make_page(rows)


class FakeClock:
    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# -----------------------
# Playwright stand-in
# -----------------------
class FakePage:
    def __init__(self, html="", goto_error=None, selector_error=None):
        self.html = html
        self.goto_error = goto_error
        self.selector_error = selector_error
        self.calls = []

    def goto(self, url, wait_until=None, timeout=None):
        self.calls.append(("goto", url, wait_until, timeout))
        if self.goto_error is not None:
            raise self.goto_error

    def wait_for_selector(self, selector, timeout=None):
        self.calls.append(("wait_for_selector", selector, timeout))
        if self.selector_error is not None:
            raise self.selector_error

    def wait_for_timeout(self, ms):
        self.calls.append(("wait_for_timeout", ms))

    def content(self):
        self.calls.append(("content",))
        return self.html


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.user_agent = None
        self.closed = False

    def new_context(self, user_agent=None):
        self.user_agent = user_agent
        return self

    def new_page(self):
        return self.page

    def close(self):
        self.closed = True


class FakePlaywright:
    def __init__(self, page):
        self.browser = FakeBrowser(page)
        self.launch_kwargs = None
        self.chromium = self

    def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser


@pytest.fixture
def fake_playwright(monkeypatch):
    """
    Returns a factory: fake_playwright(page) patches page_fetcher.sync_playwright
    and returns the FakePlaywright so tests can inspect the browser.
    """
    from ipl_live import page_fetcher

    def install(page: FakePage) -> FakePlaywright:
        pw = FakePlaywright(page)
        monkeypatch.setattr(page_fetcher, "sync_playwright", lambda: nullcontext(pw))
        return pw

    return install
