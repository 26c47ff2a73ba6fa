# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from portfolio_api.domain.accounts.entities import Account
from portfolio_api.domain.accounts.exceptions import AccountExistsError
from portfolio_api.domain.accounts.repositories import AccountRepository, PasswordHasher
from portfolio_api.shared.errors.base import ConflictError


class RegisterAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> Account:
        existing = self._accounts.find_by_username(username)
        if existing:
            raise AccountExistsError()
        hashed = self._password_hasher.hash(password)
        account = Account(
            id="", username=username, password_hash=hashed, created_at=datetime.now(UTC)
        )
        try:
            return self._accounts.add(account)
        except ConflictError as exc:
            # A concurrent registration claimed the username after our lookup
            raise AccountExistsError() from exc
