"""
Extraction and deduplication of Google Search grounding sources.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from footyai.config import FALLBACK_SOURCE_TITLE
from footyai.data.schema import GroundingSource


def dedupe_sources(sources: Iterable[GroundingSource]) -> List[GroundingSource]:
    """
    Keep one source per URI.

    When a URI repeats, the later title replaces the earlier one, but the
    source keeps the position where its URI first appeared.
    """
    by_uri: dict[str, GroundingSource] = {}
    for source in sources:
        by_uri[source.uri] = source
    return list(by_uri.values())


def extract_grounding_sources(response: Any) -> Optional[List[GroundingSource]]:
    """
    Collect web citations from a Gemini response.

    Parameters
    ----------
    response : google.genai.types.GenerateContentResponse
        Raw SDK response (or any object with the same attributes).

    Returns
    -------
    list[GroundingSource] | None
        Deduplicated web sources, or None when the response carries no
        grounding chunks at all.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) if metadata else None
    if chunks is None:
        return None

    sources = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None:
            continue
        sources.append(
            GroundingSource(
                title=getattr(web, "title", None) or FALLBACK_SOURCE_TITLE,
                uri=getattr(web, "uri", None) or "",
            )
        )
    return dedupe_sources(sources)
