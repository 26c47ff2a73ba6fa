from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from portfolio_api.application.services.token_signing import JwtTokenService
from portfolio_api.domain.accounts.exceptions import InvalidTokenError

SECRET = "unit-test-secret-0123456789abcdef0123"
ISSUED_AT = datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC)


class FrozenClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(ISSUED_AT)


@pytest.fixture()
def service(clock: FrozenClock) -> JwtTokenService:
    return JwtTokenService(SECRET, clock=clock)


def test_issued_token_carries_account_and_two_hour_expiry(service: JwtTokenService) -> None:
    token = service.issue("abc123")

    assert token.account_id == "abc123"
    assert token.expires_at == ISSUED_AT + timedelta(hours=2)
    claims = jwt.decode(
        token.token, SECRET, algorithms=["HS256"], options={"verify_exp": False}
    )
    assert claims["sub"] == "abc123"
    assert claims["exp"] - claims["iat"] == 7200


def test_token_valid_just_before_expiry(service: JwtTokenService, clock: FrozenClock) -> None:
    token = service.issue("abc123")

    clock.advance(7199)

    assert service.verify(token.token).account_id == "abc123"


def test_token_invalid_just_after_expiry(service: JwtTokenService, clock: FrozenClock) -> None:
    token = service.issue("abc123")

    clock.advance(7201)

    with pytest.raises(InvalidTokenError):
        service.verify(token.token)


def test_two_issues_give_distinct_tokens_both_valid(service: JwtTokenService) -> None:
    first = service.issue("abc123")
    second = service.issue("abc123")

    assert first.token != second.token
    assert service.verify(first.token).account_id == "abc123"
    assert service.verify(second.token).account_id == "abc123"


def test_truncated_token_is_rejected(service: JwtTokenService) -> None:
    token = service.issue("abc123")

    with pytest.raises(InvalidTokenError):
        service.verify(token.token[:-1])


def test_token_signed_with_other_secret_is_rejected(clock: FrozenClock) -> None:
    foreign = JwtTokenService("another-secret-0123456789abcdef0123", clock=clock)
    token = foreign.issue("abc123")

    with pytest.raises(InvalidTokenError):
        JwtTokenService(SECRET, clock=clock).verify(token.token)


@pytest.mark.parametrize("garbage", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_rejected(service: JwtTokenService, garbage: str) -> None:
    with pytest.raises(InvalidTokenError):
        service.verify(garbage)


def test_token_without_subject_is_rejected(service: JwtTokenService) -> None:
    exp = int((ISSUED_AT + timedelta(hours=1)).timestamp())
    token = jwt.encode({"exp": exp}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_custom_ttl(clock: FrozenClock) -> None:
    service = JwtTokenService(SECRET, ttl=timedelta(minutes=5), clock=clock)
    token = service.issue("abc123")

    clock.advance(301)

    with pytest.raises(InvalidTokenError):
        service.verify(token.token)


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService("")
