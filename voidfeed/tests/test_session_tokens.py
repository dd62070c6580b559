from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from voidfeed.application.services.session_tokens import JoseSessionIssuer
from voidfeed.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from voidfeed.shared.errors import FaultClass


def test_issue_and_validate_round_trip(issuer: JoseSessionIssuer, clock) -> None:
    token = issuer.issue("user-1", "ali")

    claims = issuer.validate(token)

    assert claims.user_id == "user-1"
    assert claims.username == "ali"
    assert claims.issued_at == clock.now
    assert claims.expires_at - claims.issued_at == timedelta(days=7)


def test_tokens_issued_back_to_back_differ(issuer: JoseSessionIssuer) -> None:
    first = issuer.issue("user-1", "ali")
    second = issuer.issue("user-1", "ali")

    assert first != second
    assert issuer.validate(first) == issuer.validate(second)


def test_token_valid_until_the_last_second(issuer: JoseSessionIssuer, clock) -> None:
    token = issuer.issue("user-1", "ali")

    clock.advance(timedelta(days=7))

    assert issuer.validate(token).user_id == "user-1"


def test_expired_token_with_valid_signature_is_rejected(issuer: JoseSessionIssuer, clock) -> None:
    token = issuer.issue("user-1", "ali")

    clock.advance(timedelta(days=7, seconds=1))

    with pytest.raises(ExpiredTokenError) as info:
        issuer.validate(token)
    assert info.value.fault is FaultClass.AUTHORIZATION


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token(issuer: JoseSessionIssuer, token: str | None) -> None:
    with pytest.raises(MissingTokenError):
        issuer.validate(token)


def test_token_signed_with_other_secret_is_invalid(issuer: JoseSessionIssuer, clock) -> None:
    forged = JoseSessionIssuer("someone-elses-secret", clock=clock).issue("user-1", "ali")

    with pytest.raises(InvalidTokenError):
        issuer.validate(forged)


def test_expired_forgery_reports_invalid_not_expired(issuer: JoseSessionIssuer, clock) -> None:
    forged = JoseSessionIssuer("someone-elses-secret", clock=clock).issue("user-1", "ali")
    clock.advance(timedelta(days=30))

    with pytest.raises(InvalidTokenError):
        issuer.validate(forged)


def test_tampered_payload_is_invalid(issuer: JoseSessionIssuer) -> None:
    header, payload, signature = issuer.issue("user-1", "ali").split(".")
    other_payload = issuer.issue("user-2", "eve").split(".")[1]

    with pytest.raises(InvalidTokenError):
        issuer.validate(".".join([header, other_payload, signature]))
    assert payload != other_payload


@pytest.mark.parametrize("token", ["garbage", "a.b.c", "Bearer"])
def test_malformed_token_is_invalid(issuer: JoseSessionIssuer, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        issuer.validate(token)


@pytest.mark.parametrize(
    "claims",
    [
        {"username": "ali", "iat": 1, "exp": 4102444800},
        {"userId": "user-1", "iat": 1, "exp": 4102444800},
        {"userId": "user-1", "username": "ali", "iat": 1},
        {"userId": "user-1", "username": "ali", "iat": 1, "exp": "tomorrow"},
        {"userId": 42, "username": "ali", "iat": 1, "exp": 4102444800},
    ],
)
def test_signed_but_malformed_claims_are_invalid(clock, claims) -> None:
    issuer = JoseSessionIssuer("claims-secret", clock=clock)
    token = jwt.encode(claims, "claims-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        issuer.validate(token)


def test_custom_ttl(clock) -> None:
    issuer = JoseSessionIssuer("secret", ttl=timedelta(hours=1), clock=clock)
    token = issuer.issue("user-1", "ali")

    clock.advance(timedelta(hours=1, seconds=1))

    with pytest.raises(ExpiredTokenError):
        issuer.validate(token)
