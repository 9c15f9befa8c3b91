"""
Shared fakes for the Gemini client, so tests run without network access or an
API key.
"""

import json
from types import SimpleNamespace

import pytest

SAMPLE_PAYLOAD = {
    "homeTeam": "Arsenal",
    "awayTeam": "Chelsea",
    "sport": "football",
    "categories": [
        {
            "title": "Match Result",
            "items": [
                {
                    "marketName": "Home Win",
                    "probability": 55,
                    "explanation": "আর্সেনাল ঘরের মাঠে শক্তিশালী।",
                },
                {
                    "marketName": "Draw",
                    "probability": 25,
                    "explanation": "সাম্প্রতিক ডার্বিগুলো প্রায়ই ড্র হয়েছে।",
                },
            ],
        },
        {
            "title": "Corners",
            "items": [
                {
                    "marketName": "Total Corners Over 9.5",
                    "probability": 62.5,
                    "explanation": "দুই দলই উইং দিয়ে আক্রমণ করে।",
                }
            ],
        },
    ],
}


def make_response(text=None, chunks=None):
    """Build an object shaped like GenerateContentResponse."""
    if chunks is None:
        candidates = [SimpleNamespace(grounding_metadata=None)]
    else:
        candidates = [
            SimpleNamespace(
                grounding_metadata=SimpleNamespace(grounding_chunks=chunks)
            )
        ]
    return SimpleNamespace(text=text, candidates=candidates)


def web_chunk(title, uri):
    return SimpleNamespace(web=SimpleNamespace(title=title, uri=uri))


class FakeModels:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response


class FakeAsyncModels(FakeModels):
    async def generate_content(self, **kwargs):
        return FakeModels.generate_content(self, **kwargs)


class FakeClient:
    """Stands in for google.genai.Client (``models`` and ``aio.models``)."""

    def __init__(self, response=None, exc=None):
        self.models = FakeModels(response, exc)
        self.aio = SimpleNamespace(models=FakeAsyncModels(response, exc))


@pytest.fixture
def sample_payload():
    return json.loads(json.dumps(SAMPLE_PAYLOAD))


@pytest.fixture
def sample_response(sample_payload):
    return make_response(
        text=json.dumps(sample_payload, ensure_ascii=False),
        chunks=[
            web_chunk("BBC Sport", "https://bbc.co.uk/a"),
            web_chunk("Sky Sports", "https://skysports.com/b"),
            web_chunk("BBC Sport - Preview", "https://bbc.co.uk/a"),
        ],
    )
