# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from portfolio_api.application.use_cases.accounts.login_account import LoginAccountUseCase
from portfolio_api.application.use_cases.accounts.register_account import (
    RegisterAccountUseCase,
)
from portfolio_api.domain.accounts.exceptions import (
    AccountExistsError,
    InvalidCredentialsError,
)
from portfolio_api.infrastructure.audit import AuditAction, audit_log
from portfolio_api.interfaces.http.context import current_context
from portfolio_api.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginSuccessDTO,
    MessageDTO,
    RegisterRequestDTO,
)
from portfolio_api.shared.errors import StoreError
from portfolio_api.shared.errors.validation import raise_validation_error
from portfolio_api.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterAccountUseCase,
        login_use_case: LoginAccountUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        ctx = current_context()
        try:
            dto = RegisterRequestDTO.model_validate(ctx.body)
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            account = self._register_use_case.execute(dto.username, dto.password)
        except AccountExistsError:
            audit_log(
                AuditAction.REGISTER,
                ip_address=ctx.remote_addr,
                details={"username": dto.username, "error": "exists"},
                success=False,
            )
            raise
        except Exception as exc:
            logger.exception(f"auth.register: err (username={dto.username})")
            raise StoreError("Registration failed") from exc

        audit_log(
            AuditAction.REGISTER,
            account_id=account.id,
            ip_address=ctx.remote_addr,
            details={"username": dto.username},
            success=True,
        )
        logger.info(f"auth.register: ok account_id={account.id}")
        payload = MessageDTO(message="Admin registered successfully").model_dump()
        return jsonify(payload), 200

    def login(self) -> tuple[Response, int]:
        ctx = current_context()
        try:
            dto = LoginRequestDTO.model_validate(ctx.body)
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ctx.remote_addr,
                details={"username": dto.username},
                success=False,
            )
            raise
        except Exception as exc:
            logger.exception(f"auth.login: err (username={dto.username})")
            raise StoreError("Login failed") from exc

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            account_id=token.account_id,
            ip_address=ctx.remote_addr,
            details={"username": dto.username},
            success=True,
        )
        logger.info(
            f"auth.login: ok username={dto.username} exp={token.expires_at.isoformat()}"
        )
        payload = LoginSuccessDTO(message="Login successful", token=token.token).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
