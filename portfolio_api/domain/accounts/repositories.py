# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import AccessToken, Account, Identity


class AccountRepository(Protocol):
    def find_by_username(self, username: str) -> Account | None: ...
    def add(self, account: Account) -> Account: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, account_id: str) -> AccessToken: ...
    def verify(self, token: str) -> Identity: ...
