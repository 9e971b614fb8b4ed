# ipl_live/fallback.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from ipl_live.models import MatchSummary, ScrapeResult, StandingRecord


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def create_mock_live_match() -> MatchSummary:
    return MatchSummary(
        id="live-1",
        date="2024-05-25",
        time="19:30",
        team1="Mumbai Indians",
        team2="Chennai Super Kings",
        venue="Wankhede Stadium, Mumbai",
        status="Live - Mumbai Indians 156/4 (16.2 overs)",
        is_live=True,
    )


def create_mock_upcoming_matches() -> List[MatchSummary]:
    return [
        MatchSummary("upcoming-1", "2024-05-26", "19:30", "Royal Challengers Bangalore", "Delhi Capitals",
                     "M.Chinnaswamy Stadium, Bangalore", "Upcoming"),
        MatchSummary("upcoming-2", "2024-05-27", "15:30", "Kolkata Knight Riders", "Rajasthan Royals",
                     "Eden Gardens, Kolkata", "Upcoming"),
        MatchSummary("upcoming-3", "2024-05-28", "19:30", "Sunrisers Hyderabad", "Punjab Kings",
                     "Rajiv Gandhi International Cricket Stadium, Hyderabad", "Upcoming"),
    ]


def create_mock_recent_matches() -> List[MatchSummary]:
    return [
        MatchSummary("recent-1", "2024-05-24", "19:30", "Kolkata Knight Riders", "Sunrisers Hyderabad",
                     "Eden Gardens, Kolkata", "Completed", result="KKR won by 8 wickets"),
        MatchSummary("recent-2", "2024-05-23", "19:30", "Chennai Super Kings", "Royal Challengers Bangalore",
                     "M.A.Chidambaram Stadium, Chennai", "Completed", result="CSK won by 20 runs"),
    ]


def create_mock_points_table() -> List[StandingRecord]:
    """
    IPL 2024 final league table. Mock only.
    """
    return [
        StandingRecord(1, "Kolkata Knight Riders", 14, 9, 3, 0, 2, 20, "+1.428"),
        StandingRecord(2, "Sunrisers Hyderabad", 14, 8, 5, 0, 1, 17, "+0.414"),
        StandingRecord(3, "Rajasthan Royals", 14, 8, 6, 0, 0, 16, "+0.273"),
        StandingRecord(4, "Royal Challengers Bangalore", 14, 7, 7, 0, 0, 14, "+0.459"),
        StandingRecord(5, "Chennai Super Kings", 14, 7, 7, 0, 0, 14, "+0.392"),
        StandingRecord(6, "Delhi Capitals", 14, 7, 7, 0, 0, 14, "-0.377"),
        StandingRecord(7, "Mumbai Indians", 14, 4, 10, 0, 0, 8, "-0.318"),
        StandingRecord(8, "Punjab Kings", 14, 3, 11, 0, 0, 6, "-0.441"),
    ]


def create_mock_result() -> ScrapeResult:
    """
    Full static payload served when every scrape attempt fails.
    Raw grid is empty: there was no table to mirror.
    """
    return ScrapeResult(
        live_match=create_mock_live_match(),
        upcoming_matches=create_mock_upcoming_matches(),
        points_table=create_mock_points_table(),
        points_table_raw_data=[],
        recent_matches=create_mock_recent_matches(),
        last_updated=utc_now_iso(),
        degraded=True,
    )
