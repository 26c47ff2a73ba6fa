# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import BcryptPasswordHasher
from .services.token_signing import JwtTokenService
from .use_cases.accounts.login_account import LoginAccountUseCase
from .use_cases.accounts.register_account import RegisterAccountUseCase
from .use_cases.accounts.verify_token import VerifyTokenUseCase

__all__ = [
    "BcryptPasswordHasher",
    "JwtTokenService",
    "LoginAccountUseCase",
    "RegisterAccountUseCase",
    "VerifyTokenUseCase",
]
