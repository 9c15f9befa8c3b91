# path: src/footyai/analysis/prompt_builder.py
"""
Build the natural-language instruction sent to Gemini for a match.
"""

from __future__ import annotations

from typing import List

from footyai.analysis.markets import get_market_groups
from footyai.config import DEFAULT_EXPLANATION_LANGUAGE
from footyai.data.schema import SPORT_DISPLAY, MatchRequest


def _format_market_groups(request: MatchRequest) -> List[str]:
    lines = []
    for idx, group in enumerate(get_market_groups(request.sport), start=1):
        lines.append(f"{idx}. {group.title}: {', '.join(group.options)}.")
    return lines


def build_prompt(
    request: MatchRequest,
    explanation_language: str = DEFAULT_EXPLANATION_LANGUAGE,
) -> str:
    """
    Build the analysis prompt for a match request.

    The prompt names both teams, the league (in parentheses, when given) and
    the sport, tells the model to ground itself with Google Search, and lists
    every mandatory market option for the sport.

    Parameters
    ----------
    request : MatchRequest
        Validated match request.
    explanation_language : str
        Human language the model must write explanations in.

    Returns
    -------
    str
        Prompt text.
    """
    sport_label = SPORT_DISPLAY[request.sport]["label"].lower()
    league_part = f" ({request.league})" if request.league else ""

    header = [
        f"Analyze the {sport_label} match: "
        f"{request.home_team} vs {request.away_team}{league_part}.",
        f"As the World's Most Advanced {SPORT_DISPLAY[request.sport]['label']} "
        "Analytics AI, you must provide 70-80% accurate predictions.",
        "",
        "STEP 1: Use Google Search to find LIVE data from sports news, "
        "H2H databases, and official league sites.",
        "STEP 2: Analyze the following categories with extreme precision.",
        "",
        "OUTPUT RULES:",
        f"- explanation: {explanation_language} (detailed reasoning).",
        "- marketName: English.",
        "- probability: a number between 0 and 100.",
        f"- sport: \"{request.sport.value}\".",
        "- Analyze EVERY option provided below without exception.",
        "",
        "MANDATORY OPTIONS:",
    ]
    return "\n".join(header + _format_market_groups(request))
