"""
Error types raised by the analyzer and the mapping from Gemini SDK errors.

Credential failures are detected from the structured ``APIError`` code/status
when the SDK provides one. Otherwise the error text is searched for
"not found" or "API_KEY"; that fallback depends on provider wording and may
misclassify.
"""

from __future__ import annotations

from google.genai import errors as genai_errors

from footyai.config import ANALYSIS_FAILED_MESSAGE, REAUTH_NEEDED

CREDENTIAL_ERROR_CODES = {401, 403, 404}
CREDENTIAL_ERROR_STATUSES = {"UNAUTHENTICATED", "PERMISSION_DENIED", "NOT_FOUND"}
CREDENTIAL_ERROR_SUBSTRINGS = ("not found", "API_KEY")


class AnalysisError(Exception):
    """Base class for analyzer errors."""


class AnalysisFailedError(AnalysisError):
    """Gemini returned no usable text payload."""

    def __init__(self, message: str = ANALYSIS_FAILED_MESSAGE) -> None:
        super().__init__(message)


class ReauthNeededError(AnalysisError):
    """The API key was rejected; the user must select or enter a new one."""

    def __init__(self) -> None:
        super().__init__(REAUTH_NEEDED)


class MissingCredentialError(ReauthNeededError):
    """No API key could be resolved before calling Gemini."""


def is_credential_error(exc: BaseException) -> bool:
    """Return True if ``exc`` means the API key is missing or invalid."""
    if isinstance(exc, genai_errors.APIError):
        if exc.code in CREDENTIAL_ERROR_CODES:
            return True
        if (exc.status or "").upper() in CREDENTIAL_ERROR_STATUSES:
            return True

    message = str(exc)
    return any(s in message for s in CREDENTIAL_ERROR_SUBSTRINGS)


def classify_provider_error(exc: Exception) -> Exception:
    """
    Map a provider exception to the error the caller should see.

    Returns a ``ReauthNeededError`` for credential failures and the original
    exception, unchanged, for everything else.
    """
    if is_credential_error(exc):
        return ReauthNeededError()
    return exc
