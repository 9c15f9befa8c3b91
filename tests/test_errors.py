import pytest
from google.genai import errors as genai_errors

from footyai.analysis.errors import (
    ReauthNeededError,
    classify_provider_error,
    is_credential_error,
)


@pytest.mark.parametrize(
    "message",
    [
        "API_KEY invalid",
        "Requested entity was not found.",
        "400 INVALID_ARGUMENT. reason: API_KEY_INVALID",
    ],
)
def test_credential_messages_become_reauth(message):
    mapped = classify_provider_error(RuntimeError(message))
    assert isinstance(mapped, ReauthNeededError)
    assert str(mapped) == "REAUTH_NEEDED"


@pytest.mark.parametrize(
    "message", ["Network timeout", "api key looks odd", "Not Found"]
)
def test_other_messages_pass_through(message):
    exc = RuntimeError(message)
    assert classify_provider_error(exc) is exc


def test_structured_unauthenticated_status_is_credential_error():
    exc = genai_errors.ClientError(
        401,
        {"error": {"code": 401, "message": "Login required", "status": "UNAUTHENTICATED"}},
    )
    assert is_credential_error(exc)


def test_server_error_is_not_credential_error():
    exc = genai_errors.ServerError(
        503,
        {"error": {"code": 503, "message": "The model is overloaded", "status": "UNAVAILABLE"}},
    )
    assert not is_credential_error(exc)
    assert classify_provider_error(exc) is exc
