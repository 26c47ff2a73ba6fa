# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, stateless access tokens."""

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from portfolio_api.domain.accounts.entities import AccessToken, Identity
from portfolio_api.domain.accounts.exceptions import InvalidTokenError
from portfolio_api.domain.accounts.repositories import TokenService

_ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """HS256 tokens carrying the account id in ``sub``.

    Expiry is checked against the injected clock rather than PyJWT's
    wall-clock check so that callers (and tests) control "now".
    """

    def __init__(
        self,
        secret_key: str,
        *,
        ttl: timedelta = timedelta(hours=2),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._ttl = ttl
        self._clock = clock

    def issue(self, account_id: str) -> AccessToken:
        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        claims = {
            "sub": account_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": secrets.token_urlsafe(16),
        }
        token = jwt.encode(claims, self._secret_key, algorithm=_ALGORITHM)
        return AccessToken(
            account_id=account_id,
            token=token,
            expires_at=datetime.fromtimestamp(claims["exp"], UTC),
        )

    def verify(self, token: str) -> Identity:
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[_ALGORITHM],
                options={"verify_exp": False, "verify_iat": False, "require": ["sub", "exp"]},
            )
        except jwt.PyJWTError as exc:
            raise InvalidTokenError() from exc

        exp = claims.get("exp")
        if not isinstance(exp, (int, float)) or self._clock().timestamp() >= exp:
            raise InvalidTokenError()

        account_id = claims.get("sub")
        if not isinstance(account_id, str) or not account_id:
            raise InvalidTokenError()
        return Identity(account_id=account_id)
