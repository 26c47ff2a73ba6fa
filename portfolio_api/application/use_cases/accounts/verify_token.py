# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio_api.domain.accounts.entities import Identity
from portfolio_api.domain.accounts.exceptions import InvalidTokenError, MissingTokenError
from portfolio_api.domain.accounts.repositories import TokenService


def extract_bearer_token(authorization: str) -> str:
    """Return the segment after the scheme in ``Bearer <token>``."""
    parts = authorization.split(" ")
    if len(parts) < 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise InvalidTokenError()
    return parts[1]


class VerifyTokenUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, authorization: str | None) -> Identity:
        if not authorization:
            raise MissingTokenError()
        return self._tokens.verify(extract_bearer_token(authorization))
