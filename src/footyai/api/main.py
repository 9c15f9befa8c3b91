# path: src/footyai/api/main.py
"""
FastAPI app exposing FootyAI analysis endpoints.

Endpoints:
- GET  /health   -> simple health check
- GET  /sports   -> supported sports with their market groups
- POST /analyze  -> search-grounded predictions for a match
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from google import genai
from google.genai import errors as genai_errors

from footyai.analysis.analyzer import AnalyzerConfig, analyze_match_async
from footyai.analysis.errors import (
    AnalysisFailedError,
    MissingCredentialError,
    ReauthNeededError,
)
from footyai.analysis.markets import get_market_groups
from footyai.auth.credentials import CredentialManager
from footyai.config import settings
from footyai.data.schema import SPORT_DISPLAY, AnalysisResponse, MatchRequest
from footyai.utils.logging_utils import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="FootyAI API",
    version="0.1.0",
    description="Search-grounded match predictions powered by Gemini",
)


def get_credentials() -> CredentialManager:
    return CredentialManager(env_key=settings.gemini_api_key)


def get_analyzer_config(
    credentials: CredentialManager = Depends(get_credentials),
) -> AnalyzerConfig:
    """Resolve the key per request and inject it into the analyzer config."""
    return AnalyzerConfig.from_settings(credentials.resolve_api_key())


def get_genai_client(
    config: AnalyzerConfig = Depends(get_analyzer_config),
) -> genai.Client:
    if not config.api_key:
        raise MissingCredentialError()
    return genai.Client(api_key=config.api_key)


@app.on_event("startup")
def startup_event() -> None:
    """Log whether an API key is configured."""
    if not get_credentials().check():
        logger.warning(
            "No GEMINI_API_KEY / API_KEY configured; /analyze will return 401."
        )


@app.exception_handler(ReauthNeededError)
async def reauth_needed_handler(request: Request, exc: ReauthNeededError) -> JSONResponse:
    return JSONResponse(status_code=401, content={"detail": str(exc)})


@app.exception_handler(AnalysisFailedError)
async def analysis_failed_handler(
    request: Request, exc: AnalysisFailedError
) -> JSONResponse:
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(genai_errors.APIError)
async def provider_error_handler(
    request: Request, exc: genai_errors.APIError
) -> JSONResponse:
    logger.error("Gemini error: %s", exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.get("/health")
def health() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/sports")
def list_sports() -> List[Dict[str, Any]]:
    """
    Return the supported sports.

    Each item:
    - id
    - label
    - icon
    - market_groups (titles of the mandatory market groups)
    """
    return [
        {
            "id": sport.value,
            "label": display["label"],
            "icon": display["icon"],
            "market_groups": [g.title for g in get_market_groups(sport)],
        }
        for sport, display in SPORT_DISPLAY.items()
    ]


@app.post(
    "/analyze",
    response_model=AnalysisResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def analyze(
    payload: MatchRequest,
    config: AnalyzerConfig = Depends(get_analyzer_config),
    client: genai.Client = Depends(get_genai_client),
) -> AnalysisResponse:
    """
    Analyze a match.

    Request:
        { "homeTeam": "...", "awayTeam": "...", "league": "...", "sport": "football" }

    Response:
        {
          "homeTeam": ..., "awayTeam": ..., "sport": ...,
          "categories": [
              {"title": ..., "items": [{"marketName": ..., "probability": ..., "explanation": ...}]}
          ],
          "sources": [{"title": ..., "uri": ...}]
        }

    A rejected or missing API key returns 401 with detail "REAUTH_NEEDED".
    """
    return await analyze_match_async(payload, config, client=client)
