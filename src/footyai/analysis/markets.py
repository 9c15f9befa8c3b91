# path: src/footyai/analysis/markets.py
"""
Mandatory market taxonomy per sport.

Every prompt asks Gemini to analyze all options of every group listed here for
the selected sport. Group titles for football are kept in Bengali, as shown
on the dashboard; market names are always English.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from footyai.data.schema import Sport


@dataclass(frozen=True)
class MarketGroup:
    """A titled group of betting markets the model must cover."""

    title: str
    options: Tuple[str, ...]


MARKET_TAXONOMY: Dict[Sport, List[MarketGroup]] = {
    Sport.FOOTBALL: [
        MarketGroup(
            "ফলাফল ও মূল বাজি",
            (
                "Home/Away Win",
                "Double Chance",
                "Draw in at least one half",
                "Win by margin (1,2,3,4+)",
            ),
        ),
        MarketGroup(
            "গোল ও বিটিএস",
            (
                "Total Goals (O/U)",
                "Handicap",
                "Goal count",
                "BTS",
                "Winner+BTS",
                "Winner+O/U",
                "1st Goal team",
                "1st Goal type (Kick)",
                "Goal in both halves",
                "Goals in a row (2,3,4,5)",
                "One-sided scoring",
            ),
        ),
        MarketGroup(
            "বিশেষ ঘটনা",
            (
                "Goal outside box",
                "Header goal",
                "Goal after corner (10s)",
                "Substitute to score",
                "Injury time goal",
                "Double Chance + BTS",
            ),
        ),
        MarketGroup(
            "শৃঙ্খলা ও ফাউল",
            (
                "Red Card",
                "Penalty/Red Card combo",
                "Penalty Awarded",
                "No Penalty/Red Card",
                "Yellow Card (O/U)",
                "Both teams 1+ card",
                "Foul winner",
            ),
        ),
        MarketGroup(
            "সেট পিস ও স্ট্যাটস",
            (
                "Corner Winner",
                "Total Corners (O/U)",
                "Last Corner Time",
                "Race to 7/9 Corners",
                "Shots on Target (O/U & Winner)",
                "Offside (O/U)",
                "Goal Kicks winner",
                "More Saves",
                "Shots towards bar/post",
            ),
        ),
        MarketGroup(
            "টেকনোলজি ও বিবিধ",
            (
                "VAR Checked",
                "Medical team entry (2+)",
                "Ball in net but no goal",
            ),
        ),
    ],
    Sport.CRICKET: [
        MarketGroup(
            "Match Result",
            ("Match Winner", "Toss Winner", "Win by margin (runs/wickets)"),
        ),
        MarketGroup(
            "Batting",
            (
                "Top Team Batter",
                "Total Match Runs (O/U)",
                "1st Innings Score (O/U)",
                "Highest Opening Partnership",
                "Century Scored",
                "Fifty by either opener",
            ),
        ),
        MarketGroup(
            "Bowling & Wickets",
            (
                "Top Team Bowler",
                "Fall of 1st Wicket (O/U)",
                "Total Wickets (O/U)",
                "Most Run Outs",
            ),
        ),
        MarketGroup(
            "Boundaries & Extras",
            (
                "Total Sixes (O/U)",
                "Total Fours (O/U)",
                "Most Sixes",
                "Total Extras (O/U)",
            ),
        ),
    ],
    Sport.BASKETBALL: [
        MarketGroup(
            "Result & Spread",
            ("Moneyline", "Point Spread", "Winning Margin", "Overtime"),
        ),
        MarketGroup(
            "Totals",
            (
                "Total Points (O/U)",
                "Team Total Points (O/U)",
                "1st Half Total (O/U)",
                "Highest Scoring Quarter",
            ),
        ),
        MarketGroup(
            "Player Props",
            (
                "Top Scorer",
                "Top Rebounder",
                "Top Assists",
                "Double-Double by any player",
            ),
        ),
        MarketGroup(
            "Game Flow",
            (
                "Race to 20 Points",
                "First Team to Score",
                "Total 3-Pointers (O/U)",
                "Total Free Throws Made (O/U)",
            ),
        ),
    ],
    Sport.TENNIS: [
        MarketGroup(
            "Match Result",
            ("Match Winner", "Correct Score (sets)", "Set Betting"),
        ),
        MarketGroup(
            "Games & Sets",
            (
                "Total Games (O/U)",
                "Game Handicap",
                "Tie-break in match",
                "Player to win a set",
            ),
        ),
        MarketGroup(
            "Serve",
            (
                "Total Aces (O/U)",
                "Most Aces",
                "Double Faults (O/U)",
                "First Set Break of Serve",
            ),
        ),
    ],
    Sport.HOCKEY: [
        MarketGroup(
            "Result",
            ("Match Winner", "Double Chance", "Draw", "Winning Margin"),
        ),
        MarketGroup(
            "Goals",
            (
                "Total Goals (O/U)",
                "Both Teams to Score",
                "First Team to Score",
                "Goal in each quarter",
                "Highest Scoring Quarter",
            ),
        ),
        MarketGroup(
            "Set Pieces & Discipline",
            (
                "Penalty Corners (O/U)",
                "Penalty Stroke Awarded",
                "Green/Yellow Card shown",
            ),
        ),
    ],
    Sport.BASEBALL: [
        MarketGroup(
            "Result",
            ("Moneyline", "Run Line", "Extra Innings", "Winning Margin"),
        ),
        MarketGroup(
            "Runs",
            (
                "Total Runs (O/U)",
                "Run in 1st Inning (YRFI/NRFI)",
                "First 5 Innings Winner",
                "Team Total Runs (O/U)",
            ),
        ),
        MarketGroup(
            "Pitching & Hitting",
            (
                "Starting Pitcher Strikeouts (O/U)",
                "Total Home Runs (O/U)",
                "Total Hits (O/U)",
                "Player to Hit a Home Run",
            ),
        ),
    ],
    Sport.TABLE_TENNIS: [
        MarketGroup(
            "Match Result",
            ("Match Winner", "Correct Score (games)", "Game Handicap"),
        ),
        MarketGroup(
            "Points & Games",
            (
                "Total Points (O/U)",
                "Total Games (O/U)",
                "1st Game Winner",
                "Deuce in any game",
            ),
        ),
    ],
}


def get_market_groups(sport: Sport | str) -> List[MarketGroup]:
    """
    Return the mandatory market groups for a sport.

    Raises
    ------
    ValueError
        If the sport is not one of the supported sports.
    """
    try:
        key = Sport(sport)
    except ValueError as exc:
        raise ValueError(f"Unsupported sport: {sport!r}") from exc
    return MARKET_TAXONOMY[key]
