# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    message: str
    status: HTTPStatus
    code: str = "app_error"
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    default_message = "Request failed"
    default_status = HTTPStatus.BAD_REQUEST
    default_code = "domain_error"

    def __init__(
        self,
        *,
        message: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message or self.default_message,
            status=status or self.default_status,
            code=self.default_code,
            context=context,
        )


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Invalid request",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status=HTTPStatus.BAD_REQUEST,
            code="validation_error",
            context=context,
        )


class NotFoundError(AppError):
    def __init__(self, label: str) -> None:
        super().__init__(
            message=f"{label} not found",
            status=HTTPStatus.NOT_FOUND,
            code="not_found",
            context=None,
        )


class ConflictError(AppError):
    def __init__(self, message: str = "Conflict", *, field: str | None = None) -> None:
        super().__init__(
            message=message,
            status=HTTPStatus.CONFLICT,
            code="conflict",
            context={"field": field} if field else None,
        )


class StoreError(AppError):
    """Backing-store failure; the message is generic and safe to show."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(
            message=message,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            code="store_error",
        )
