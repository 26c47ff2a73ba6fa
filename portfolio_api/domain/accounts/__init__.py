# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AccessToken, Account, Identity
from .exceptions import (
    AccountExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)
from .repositories import AccountRepository, PasswordHasher, TokenService

__all__ = [
    "AccessToken",
    "Account",
    "AccountExistsError",
    "AccountRepository",
    "Identity",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "PasswordHasher",
    "TokenService",
]
