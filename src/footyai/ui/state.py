# path: src/footyai/ui/state.py
"""
UI state for the FootyAI app and the handlers that write it.

Only ``handle_submit`` and the credential handlers change the state. A new
submission simply replaces the displayed result when it finishes; a failed
submission shows an error but keeps the previous result in the state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from footyai.analysis.errors import ReauthNeededError
from footyai.auth.credentials import CredentialManager
from footyai.config import CONNECTION_FAILED_MESSAGE, REAUTH_MESSAGE
from footyai.data.schema import AnalysisResponse, MatchRequest
from footyai.utils.logging_utils import get_logger

logger = get_logger(__name__)

Analyzer = Callable[[MatchRequest], AnalysisResponse]


@dataclass
class AppState:
    loading: bool = False
    error: Optional[str] = None
    result: Optional[AnalysisResponse] = None
    has_key: bool = True


def validate_form(home_team: str, away_team: str) -> bool:
    """Both team fields are required before submitting."""
    return bool(home_team.strip()) and bool(away_team.strip())


def handle_submit(
    state: AppState,
    request: MatchRequest,
    analyze: Analyzer,
    credentials: Optional[CredentialManager] = None,
) -> AppState:
    """
    Run one analysis and record its outcome in ``state``.

    Parameters
    ----------
    state : AppState
        State to update in place.
    request : MatchRequest
        Validated form input.
    analyze : Callable[[MatchRequest], AnalysisResponse]
        Adapter call, with the API key already bound.
    credentials : CredentialManager | None
        Invalidated when the provider rejects the key.

    Returns
    -------
    AppState
        The same state object.
    """
    state.loading = True
    state.error = None
    try:
        state.result = analyze(request)
    except ReauthNeededError:
        logger.warning("API key rejected; asking the user to reconnect.")
        state.has_key = False
        if credentials is not None:
            credentials.invalidate()
        state.error = REAUTH_MESSAGE
    except Exception as exc:  # noqa: BLE001
        logger.error("Analysis failed: %s", exc)
        state.error = str(exc) or CONNECTION_FAILED_MESSAGE
    finally:
        state.loading = False
    return state


def handle_connect(state: AppState, credentials: CredentialManager) -> AppState:
    """Run the key-selection flow and optimistically mark the key as present."""
    if credentials.connect():
        state.has_key = True
        state.error = None
    return state


def handle_reset(state: AppState) -> AppState:
    """'Reset engine': go back to the connect screen."""
    state.has_key = False
    return state
