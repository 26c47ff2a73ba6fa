# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from portfolio_api.shared.errors.base import DomainError


class AccountExistsError(DomainError):
    default_code = "account_exists"
    default_message = "User already exists"


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_message = "Invalid credentials"


class MissingTokenError(DomainError):
    default_code = "missing_token"
    default_message = "Access denied. No token."
    default_status = HTTPStatus.UNAUTHORIZED


class InvalidTokenError(DomainError):
    default_code = "invalid_token"
    default_message = "Invalid or expired token"
    default_status = HTTPStatus.FORBIDDEN
