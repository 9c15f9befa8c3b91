import asyncio
import json

import pytest
from google.genai import errors as genai_errors

from conftest import FakeClient, make_response, web_chunk
from footyai.analysis.analyzer import (
    AnalyzerConfig,
    analyze_match,
    analyze_match_async,
    build_generation_config,
    parse_analysis_response,
)
from footyai.analysis.errors import (
    AnalysisFailedError,
    MissingCredentialError,
    ReauthNeededError,
)
from footyai.config import REAUTH_NEEDED
from footyai.data.schema import RESPONSE_SCHEMA, MatchRequest


@pytest.fixture
def request_arsenal():
    return MatchRequest(
        home_team="Arsenal", away_team="Chelsea", league="Premier League"
    )


@pytest.fixture
def config():
    return AnalyzerConfig(api_key="test-key")


def test_analyze_match_sends_exactly_one_call(
    request_arsenal, config, sample_response
):
    client = FakeClient(response=sample_response)
    result = analyze_match(request_arsenal, config, client=client)

    assert len(client.models.calls) == 1
    call = client.models.calls[0]
    assert call["model"] == config.model
    assert "Arsenal" in call["contents"]
    assert "Chelsea" in call["contents"]
    assert "Premier League" in call["contents"]

    assert result.home_team == "Arsenal"
    assert result.away_team == "Chelsea"
    assert result.categories
    for category in result.categories:
        for item in category.items:
            assert 0 <= item.probability <= 100


def test_analyze_match_dedupes_sources_last_title_wins(
    request_arsenal, config, sample_response
):
    result = analyze_match(
        request_arsenal, config, client=FakeClient(response=sample_response)
    )

    assert [(s.title, s.uri) for s in result.sources] == [
        ("BBC Sport - Preview", "https://bbc.co.uk/a"),
        ("Sky Sports", "https://skysports.com/b"),
    ]


def test_generation_config_uses_search_tool_and_schema(config):
    generation_config = build_generation_config(config)

    assert generation_config.response_mime_type == "application/json"
    assert generation_config.temperature == pytest.approx(0.2)
    assert len(generation_config.tools) == 1
    assert generation_config.tools[0].google_search is not None
    assert generation_config.response_schema is not None
    assert RESPONSE_SCHEMA["required"] == ["homeTeam", "awayTeam", "categories"]


@pytest.mark.parametrize("text", [None, ""])
def test_missing_text_raises_analysis_failed(request_arsenal, config, text):
    client = FakeClient(response=make_response(text=text))
    with pytest.raises(AnalysisFailedError) as excinfo:
        analyze_match(request_arsenal, config, client=client)
    assert str(excinfo.value) == "Analysis failed. Please try again."


def test_malformed_json_raises_analysis_failed():
    with pytest.raises(AnalysisFailedError):
        parse_analysis_response(make_response(text="{not json"))


def test_sources_absent_without_grounding_metadata(sample_payload):
    result = parse_analysis_response(make_response(text=json.dumps(sample_payload)))
    assert result.sources is None
    assert "sources" not in result.to_wire()


def test_non_web_chunks_are_ignored(sample_payload):
    chunks = [
        web_chunk(None, "https://example.com/x"),
        web_chunk("", "https://example.com/y"),
    ]
    chunks.insert(1, type("RetrievedChunk", (), {"web": None})())
    response = make_response(text=json.dumps(sample_payload), chunks=chunks)

    result = parse_analysis_response(response)

    assert [s.title for s in result.sources] == ["Web Source", "Web Source"]
    assert [s.uri for s in result.sources] == [
        "https://example.com/x",
        "https://example.com/y",
    ]


def test_api_key_error_becomes_reauth_needed(request_arsenal, config):
    client = FakeClient(exc=RuntimeError("API_KEY invalid"))
    with pytest.raises(ReauthNeededError) as excinfo:
        analyze_match(request_arsenal, config, client=client)
    assert str(excinfo.value) == REAUTH_NEEDED


def test_other_errors_pass_through_unchanged(request_arsenal, config):
    original = RuntimeError("Quota exceeded for today")
    client = FakeClient(exc=original)
    with pytest.raises(RuntimeError) as excinfo:
        analyze_match(request_arsenal, config, client=client)
    assert excinfo.value is original


def test_structured_permission_error_becomes_reauth_needed(request_arsenal, config):
    exc = genai_errors.ClientError(
        403,
        {"error": {"code": 403, "message": "Permission denied", "status": "PERMISSION_DENIED"}},
    )
    with pytest.raises(ReauthNeededError):
        analyze_match(request_arsenal, config, client=FakeClient(exc=exc))


def test_missing_key_without_client_needs_reauth(request_arsenal):
    with pytest.raises(MissingCredentialError) as excinfo:
        analyze_match(request_arsenal, AnalyzerConfig(api_key=None))
    assert str(excinfo.value) == REAUTH_NEEDED


def test_async_variant_matches_sync(request_arsenal, config, sample_response):
    client = FakeClient(response=sample_response)
    result = asyncio.run(analyze_match_async(request_arsenal, config, client=client))

    assert len(client.aio.models.calls) == 1
    assert client.models.calls == []
    assert result.home_team == "Arsenal"
    assert len(result.sources) == 2


def test_async_variant_maps_not_found_to_reauth(request_arsenal, config):
    client = FakeClient(exc=RuntimeError("Requested entity was not found."))
    with pytest.raises(ReauthNeededError):
        asyncio.run(analyze_match_async(request_arsenal, config, client=client))
