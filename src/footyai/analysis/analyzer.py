# path: src/footyai/analysis/analyzer.py
"""
Search-grounded match analysis with Google Gemini.

Usage (from project root, with GEMINI_API_KEY set):

    python -m footyai.analysis.analyzer --home Arsenal --away Chelsea \
        --league "Premier League"

This will:
- Build the analysis prompt for the match and sport.
- Send ONE generate_content request with the Google Search tool enabled and a
  fixed JSON response schema.
- Parse the JSON, attach deduplicated grounding sources and print the result.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from typing import Any, Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from footyai.analysis.errors import (
    AnalysisFailedError,
    MissingCredentialError,
    classify_provider_error,
)
from footyai.analysis.prompt_builder import build_prompt
from footyai.analysis.sources import extract_grounding_sources
from footyai.config import (
    DEFAULT_EXPLANATION_LANGUAGE,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    RESPONSE_MIME_TYPE,
    Settings,
    settings,
)
from footyai.data.schema import RESPONSE_SCHEMA, AnalysisResponse, MatchRequest
from footyai.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class AnalyzerConfig:
    """
    Configuration for one analysis call.

    Attributes
    ----------
    api_key : str | None
        Gemini API key, injected by the caller (never read from the
        environment here).
    model : str
        Gemini model identifier.
    temperature : float
        Sampling temperature; kept low for stable probabilities.
    explanation_language : str
        Language the model writes explanations in.
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    explanation_language: str = DEFAULT_EXPLANATION_LANGUAGE

    @classmethod
    def from_settings(
        cls, api_key: Optional[str], cfg: Settings = settings
    ) -> "AnalyzerConfig":
        """Build a config from environment settings and an explicit key."""
        return cls(
            api_key=api_key,
            model=cfg.gemini_model,
            temperature=cfg.temperature,
            explanation_language=cfg.explanation_language,
        )


def build_generation_config(config: AnalyzerConfig) -> types.GenerateContentConfig:
    """Return the Gemini generation config: search tool, JSON schema, temperature."""
    return types.GenerateContentConfig(
        tools=[types.Tool(google_search=types.GoogleSearch())],
        response_mime_type=RESPONSE_MIME_TYPE,
        response_schema=RESPONSE_SCHEMA,
        temperature=config.temperature,
    )


def _make_client(config: AnalyzerConfig) -> genai.Client:
    # New client per call so a freshly selected key is always used
    if not config.api_key:
        raise MissingCredentialError()
    return genai.Client(api_key=config.api_key)


def parse_analysis_response(response: Any) -> AnalysisResponse:
    """
    Turn a raw Gemini response into an ``AnalysisResponse``.

    Raises
    ------
    AnalysisFailedError
        If the response has no text, or the text is not the expected JSON.
    """
    text = getattr(response, "text", None)
    if not text:
        raise AnalysisFailedError()

    try:
        data = json.loads(text)
        result = AnalysisResponse.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.error("Could not parse analysis payload: %s", exc)
        raise AnalysisFailedError() from exc

    sources = extract_grounding_sources(response)
    if sources is not None:
        result.sources = sources
        logger.info("Attached %d grounding sources.", len(sources))

    return result


def _prepare(
    request: MatchRequest, config: AnalyzerConfig
) -> tuple[str, types.GenerateContentConfig]:
    prompt = build_prompt(request, config.explanation_language)
    logger.info(
        "Analyzing %s match %s vs %s with %s",
        request.sport.value,
        request.home_team,
        request.away_team,
        config.model,
    )
    return prompt, build_generation_config(config)


def analyze_match(
    request: MatchRequest,
    config: AnalyzerConfig,
    client: Optional[genai.Client] = None,
) -> AnalysisResponse:
    """
    Run a search-grounded analysis for one match.

    Parameters
    ----------
    request : MatchRequest
        Validated match request.
    config : AnalyzerConfig
        Model parameters and the API key.
    client : google.genai.Client | None
        Client to use; a new one is created from ``config.api_key`` if None.

    Returns
    -------
    AnalysisResponse
        Parsed predictions with deduplicated sources.

    Raises
    ------
    ReauthNeededError
        If the API key is missing or was rejected.
    AnalysisFailedError
        If the model returned no usable payload.
    """
    prompt, generation_config = _prepare(request, config)
    if client is None:
        client = _make_client(config)

    try:
        response = client.models.generate_content(
            model=config.model,
            contents=prompt,
            config=generation_config,
        )
    except Exception as exc:
        logger.error("Analysis error: %s", exc)
        mapped = classify_provider_error(exc)
        if mapped is exc:
            raise
        raise mapped from exc

    return parse_analysis_response(response)


async def analyze_match_async(
    request: MatchRequest,
    config: AnalyzerConfig,
    client: Optional[genai.Client] = None,
) -> AnalysisResponse:
    """Async variant of :func:`analyze_match` using ``client.aio``."""
    prompt, generation_config = _prepare(request, config)
    if client is None:
        client = _make_client(config)

    try:
        response = await client.aio.models.generate_content(
            model=config.model,
            contents=prompt,
            config=generation_config,
        )
    except Exception as exc:
        logger.error("Analysis error: %s", exc)
        mapped = classify_provider_error(exc)
        if mapped is exc:
            raise
        raise mapped from exc

    return parse_analysis_response(response)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a FootyAI match analysis.")
    parser.add_argument("--home", required=True, help="Home team / team 1.")
    parser.add_argument("--away", required=True, help="Away team / team 2.")
    parser.add_argument("--league", default=None, help="League or tournament.")
    parser.add_argument(
        "--sport",
        default=None,
        help="Sport (football, cricket, basketball, tennis, hockey, baseball, "
        "table tennis). Defaults to football.",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Gemini model identifier. If not provided, uses settings.",
    )
    args = parser.parse_args()

    request = MatchRequest(
        home_team=args.home,
        away_team=args.away,
        league=args.league,
        sport=args.sport,
    )
    config = AnalyzerConfig.from_settings(settings.gemini_api_key)
    if args.model:
        config.model = args.model

    result = analyze_match(request, config)
    print(json.dumps(result.to_wire(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
