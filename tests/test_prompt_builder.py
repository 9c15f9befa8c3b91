import pytest

from footyai.analysis.markets import MARKET_TAXONOMY, get_market_groups
from footyai.analysis.prompt_builder import build_prompt
from footyai.data.schema import Sport, MatchRequest


def test_prompt_contains_teams_league_and_football_markets():
    request = MatchRequest(
        home_team="Arsenal", away_team="Chelsea", league="Premier League"
    )
    prompt = build_prompt(request)

    assert "Arsenal vs Chelsea (Premier League)" in prompt
    assert "football match" in prompt
    assert "Google Search" in prompt
    assert "explanation: Bengali" in prompt
    assert "marketName: English" in prompt
    for group in MARKET_TAXONOMY[Sport.FOOTBALL]:
        assert group.title in prompt
        for option in group.options:
            assert option in prompt


def test_prompt_without_league_has_no_parentheses():
    request = MatchRequest(home_team="Arsenal", away_team="Chelsea", league="  ")
    prompt = build_prompt(request)

    assert request.league is None
    assert "Arsenal vs Chelsea." in prompt
    assert "()" not in prompt


def test_prompt_uses_sport_specific_taxonomy():
    request = MatchRequest(
        home_team="India", away_team="Australia", league="World Cup", sport="cricket"
    )
    prompt = build_prompt(request, explanation_language="English")

    assert "cricket match" in prompt
    assert "World Cup" in prompt
    assert "explanation: English" in prompt
    assert "Total Sixes (O/U)" in prompt
    assert "Corner Winner" not in prompt


def test_every_sport_has_market_groups():
    for sport in Sport:
        groups = get_market_groups(sport)
        assert groups
        assert all(group.options for group in groups)


def test_get_market_groups_accepts_plain_strings():
    assert get_market_groups("table tennis") == MARKET_TAXONOMY[Sport.TABLE_TENNIS]


def test_get_market_groups_rejects_unknown_sport():
    with pytest.raises(ValueError, match="Unsupported sport"):
        get_market_groups("curling")
