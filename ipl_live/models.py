from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# -----------------------------
# Standings row (one per team)
# -----------------------------
@dataclass(frozen=True)
class StandingRecord:
    position: int
    team: str

    matches: int = 0
    won: int = 0
    lost: int = 0
    tied: int = 0
    # Not present in the iplt20 table layout; always 0 for scraped rows
    no_result: int = 0

    points: int = 0
    net_run_rate: str = "0.000"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "team": self.team,
            "matches": self.matches,
            "won": self.won,
            "lost": self.lost,
            "tied": self.tied,
            "noResult": self.no_result,
            "points": self.points,
            "netRunRate": self.net_run_rate,
        }


# -----------------------------
# Match card (static placeholder data only)
# -----------------------------
@dataclass(frozen=True)
class MatchSummary:
    id: str
    date: str
    time: str
    team1: str
    team2: str
    venue: str
    status: str

    result: Optional[str] = None
    is_live: Optional[bool] = None

    score1: Optional[str] = None
    score2: Optional[str] = None
    overs1: Optional[str] = None
    overs2: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "date": self.date,
            "time": self.time,
            "team1": self.team1,
            "team2": self.team2,
            "venue": self.venue,
            "status": self.status,
        }
        # Optional fields are omitted rather than sent as null
        optional = {
            "result": self.result,
            "isLive": self.is_live,
            "score1": self.score1,
            "score2": self.score2,
            "overs1": self.overs1,
            "overs2": self.overs2,
        }
        out.update({k: v for k, v in optional.items() if v is not None})
        return out


# -----------------------------
# Full payload served by /api/scrape
# -----------------------------
@dataclass
class ScrapeResult:
    points_table: List[StandingRecord]
    points_table_raw_data: List[List[str]]
    upcoming_matches: List[MatchSummary]
    recent_matches: List[MatchSummary]
    last_updated: str

    live_match: Optional[MatchSummary] = None

    # True when any part of the standings came from the static fallback
    degraded: bool = field(default=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.live_match is not None:
            out["liveMatch"] = self.live_match.to_dict()
        out["upcomingMatches"] = [m.to_dict() for m in self.upcoming_matches]
        out["pointsTable"] = [r.to_dict() for r in self.points_table]
        out["pointsTableRawData"] = [list(row) for row in self.points_table_raw_data]
        out["recentMatches"] = [m.to_dict() for m in self.recent_matches]
        out["lastUpdated"] = self.last_updated
        return out
