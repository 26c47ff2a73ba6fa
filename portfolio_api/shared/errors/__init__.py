from .base import (
    AppError,
    ConflictError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
