# ipl_live/points_table.py
from __future__ import annotations

import logging
import re
from typing import Any, List, Tuple, Union

from bs4 import BeautifulSoup, Tag

from ipl_live.errors import ElementNotFound, ParseAnomaly
from ipl_live.models import StandingRecord

logger = logging.getLogger(__name__)

DEFAULT_TABLE_SELECTOR = "#pointsdata"

# iplt20.com cell markup
TEAM_CELL_CLASS = ".ih-pt-cont"      # team name + logo wrapper
FORM_CELL_CLASS = ".ih-pt-fb"        # recent form wrapper
RESULT_FLAG_CLASS = ".rf"            # one W/L/N flag inside the form wrapper

# Pos | (logo) | Team | P | W | L | NR/T | NRR | For | Against | Pts | Form
MIN_STANDINGS_CELLS = 9

RawTableGrid = List[List[str]]

_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def _safe_int(x: Any, default: int = 0) -> int:
    """
    Lenient integer parse: optional sign + leading digits ("12", "+3", "7*").
    Empty, non-numeric and zero values all fall back to `default`.
    """
    if x is None:
        return default
    sx = str(x).strip().replace("−", "-")
    m = _LEADING_INT_RE.match(sx)
    if not m:
        return default
    value = int(m.group(0))
    return value or default


def extract_cell_text(cell: Tag) -> str:
    """
    Text for one <td>, in priority order:
      1) team name wrapper text
      2) form flags joined without separator (e.g. "WWLNW")
      3) the cell's own text
    """
    team = cell.select(TEAM_CELL_CLASS)
    if team:
        return "".join(t.get_text() for t in team).strip()

    if cell.select(FORM_CELL_CLASS):
        flags = [rf.get_text().strip() for rf in cell.select(RESULT_FLAG_CLASS)]
        return "".join(flags)

    return cell.get_text().strip()


def build_standing_record(cells: List[str], row_index: int) -> StandingRecord:
    """Map one >= 9 cell row to a StandingRecord, applying per-field defaults."""
    return StandingRecord(
        position=_safe_int(cells[0], row_index + 1),
        team=cells[2] or f"Team {row_index + 1}",
        matches=_safe_int(cells[3], 0),
        won=_safe_int(cells[4], 0),
        lost=_safe_int(cells[5], 0),
        tied=_safe_int(cells[6], 0),
        no_result=0,
        net_run_rate=cells[7] or "0.000",
        points=_safe_int(cells[-2], 0),
    )


def parse_points_table(
    document: Union[str, BeautifulSoup],
    selector: str = DEFAULT_TABLE_SELECTOR,
    *,
    strict: bool = False,
) -> Tuple[RawTableGrid, List[StandingRecord]]:
    """
    Walk every <tr> under `selector` and return (raw grid, standings).

    - grid keeps every row with at least one non-empty cell, short rows included
    - standings only get rows with >= MIN_STANDINGS_CELLS cells
    - strict=True raises ParseAnomaly for a non-empty short row instead of skipping it

    An absent selector is not an error here: both lists come back empty.
    """
    soup = document if isinstance(document, BeautifulSoup) else BeautifulSoup(document, "html.parser")

    grid: RawTableGrid = []
    records: List[StandingRecord] = []

    rows = soup.select(f"{selector} tr")
    for row_index, row in enumerate(rows):
        cells = [extract_cell_text(td) for td in row.find_all("td")]
        has_text = any(cells)

        if has_text:
            grid.append(cells)

        if len(cells) >= MIN_STANDINGS_CELLS:
            records.append(build_standing_record(cells, row_index))
        elif has_text:
            if strict:
                raise ParseAnomaly(
                    f"Row {row_index} has {len(cells)} cells, expected >= {MIN_STANDINGS_CELLS}: {cells}"
                )
            logger.debug("Skipping short row %d (%d cells): %s", row_index, len(cells), cells)

    logger.info("Parsed points table: %d raw rows, %d standings", len(grid), len(records))
    return grid, records


def require_table(html: str, selector: str = DEFAULT_TABLE_SELECTOR) -> BeautifulSoup:
    """Parse markup and fail with ElementNotFound when the standings table is missing."""
    soup = BeautifulSoup(html, "html.parser")
    if soup.select_one(selector) is None:
        raise ElementNotFound(f"Selector {selector!r} not found in page markup")
    return soup
