import pytest

from agentdesk.domain.services.auth.expiry import is_access_token_expired
from tests.factories.token import expired_access_body, invalid_refresh_body


def test_expired_access_token_is_detected():
    body = {"code": "token_not_valid", "messages": [{"token_type": "access", "message": "Token is expired"}]}
    assert is_access_token_expired(body) is True


def test_backend_expiry_body_with_extra_fields_is_detected():
    assert is_access_token_expired(expired_access_body()) is True


@pytest.mark.parametrize(
    "message",
    ["Access token has EXPIRED", "token expired at 12:00", "Expired"],
)
def test_expiry_wording_is_matched_case_insensitively(message):
    assert is_access_token_expired(expired_access_body(message)) is True


def test_invalid_refresh_token_is_not_expiry():
    body = {"code": "token_not_valid", "messages": [{"token_type": "refresh", "message": "Token is invalid"}]}
    assert is_access_token_expired(body) is False
    assert is_access_token_expired(invalid_refresh_body()) is False


def test_expired_refresh_token_is_not_access_expiry():
    body = {"code": "token_not_valid", "messages": [{"token_type": "refresh", "message": "Token is expired"}]}
    assert is_access_token_expired(body) is False


def test_access_token_invalid_but_not_expired():
    body = {"code": "token_not_valid", "messages": [{"token_type": "access", "message": "Token is invalid"}]}
    assert is_access_token_expired(body) is False


def test_expiry_message_with_other_code_is_ignored():
    body = {
        "code": "authentication_failed",
        "messages": [{"token_type": "access", "message": "Token is expired"}],
    }
    assert is_access_token_expired(body) is False


def test_any_matching_message_is_enough():
    body = {
        "code": "token_not_valid",
        "messages": [
            {"token_type": "refresh", "message": "Token is invalid"},
            "garbage",
            {"token_type": "access"},
            {"token_type": "access", "message": "Token is expired"},
        ],
    }
    assert is_access_token_expired(body) is True


@pytest.mark.parametrize(
    "body",
    [
        {},
        None,
        "Token is expired",
        b"<html>",
        ["token_not_valid"],
        {"code": "token_not_valid"},
        {"code": "token_not_valid", "messages": None},
        {"code": "token_not_valid", "messages": "Token is expired"},
        {"code": "token_not_valid", "messages": [{"token_type": "access", "message": None}]},
        {"detail": "Authentication credentials were not provided."},
    ],
)
def test_unusable_bodies_are_not_expiry(body):
    assert is_access_token_expired(body) is False
