# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio_api.domain.accounts.entities import AccessToken
from portfolio_api.domain.accounts.exceptions import InvalidCredentialsError
from portfolio_api.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)


class LoginAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, username: str, password: str) -> AccessToken:
        account = self._accounts.find_by_username(username)
        if account is None or not self._password_hasher.verify(password, account.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(account.id)
