"""
Schema definitions for match requests and Gemini analysis responses.

The pydantic models accept both the camelCase field names produced by the
model (``homeTeam``, ``marketName``) and snake_case names, and serialize by
alias so the API returns the same shape Gemini was asked for.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from footyai.config import DEFAULT_SPORT


class Sport(str, Enum):
    """Sports offered by the match form."""

    FOOTBALL = "football"
    CRICKET = "cricket"
    BASKETBALL = "basketball"
    TENNIS = "tennis"
    HOCKEY = "hockey"
    BASEBALL = "baseball"
    TABLE_TENNIS = "table tennis"


# Display label and icon for each sport, in form order
SPORT_DISPLAY: Dict[Sport, Dict[str, str]] = {
    Sport.FOOTBALL: {"label": "Football", "icon": "⚽"},
    Sport.CRICKET: {"label": "Cricket", "icon": "🏏"},
    Sport.BASKETBALL: {"label": "Basketball", "icon": "🏀"},
    Sport.TENNIS: {"label": "Tennis", "icon": "🎾"},
    Sport.HOCKEY: {"label": "Hockey", "icon": "🏑"},
    Sport.BASEBALL: {"label": "Baseball", "icon": "⚾"},
    Sport.TABLE_TENNIS: {"label": "Table Tennis", "icon": "🏓"},
}


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MatchRequest(_WireModel):
    """Input collected by the match form."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    home_team: str = Field(alias="homeTeam", min_length=1)
    away_team: str = Field(alias="awayTeam", min_length=1)
    league: Optional[str] = None
    sport: Sport = Sport(DEFAULT_SPORT)

    @field_validator("league", mode="before")
    @classmethod
    def _blank_league_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("sport", mode="before")
    @classmethod
    def _normalize_sport(cls, v: Any) -> Any:
        if v is None:
            return DEFAULT_SPORT
        if isinstance(v, str):
            return v.strip().lower()
        return v


class PredictionItem(_WireModel):
    """A single market with its probability (0-100, not clamped)."""

    market_name: str = Field(alias="marketName")
    probability: float
    explanation: str


class PredictionCategory(_WireModel):
    title: str
    items: List[PredictionItem] = Field(default_factory=list)


class GroundingSource(_WireModel):
    title: str
    uri: str


class AnalysisResponse(_WireModel):
    """Structured prediction data returned by the analyzer."""

    home_team: str = Field(alias="homeTeam")
    away_team: str = Field(alias="awayTeam")
    sport: Optional[str] = None
    categories: List[PredictionCategory] = Field(default_factory=list)
    sources: Optional[List[GroundingSource]] = None

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Output schema sent to Gemini (OpenAPI subset understood by the SDK)
RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "homeTeam": {"type": "STRING"},
        "awayTeam": {"type": "STRING"},
        "sport": {"type": "STRING"},
        "categories": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "title": {"type": "STRING"},
                    "items": {
                        "type": "ARRAY",
                        "items": {
                            "type": "OBJECT",
                            "properties": {
                                "marketName": {"type": "STRING"},
                                "probability": {"type": "NUMBER"},
                                "explanation": {"type": "STRING"},
                            },
                            "required": [
                                "marketName",
                                "probability",
                                "explanation",
                            ],
                        },
                    },
                },
                "required": ["title", "items"],
            },
        },
    },
    "required": ["homeTeam", "awayTeam", "categories"],
}


def get_response_schema_description() -> Dict[str, str]:
    """
    Return a human-readable description of the analysis response schema.

    Returns
    -------
    Dict[str, str]
        Mapping from field path to description.
    """
    return {
        "homeTeam": "Home team / first participant, echoed by the model",
        "awayTeam": "Away team / second participant, echoed by the model",
        "sport": "Sport tag echoed by the model (optional)",
        "categories[].title": "Market category title",
        "categories[].items[].marketName": "Market name (English)",
        "categories[].items[].probability": "Probability in percent (0-100)",
        "categories[].items[].explanation": "Reasoning for the probability",
        "sources[].title": "Title of a web page used for grounding",
        "sources[].uri": "URI of a web page used for grounding",
    }
