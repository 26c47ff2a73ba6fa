from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


class RegisterRequestDTO(BaseModel):
    username: str = Field("", max_length=128, validate_default=True)
    password: str = Field("", validate_default=True)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if len(value.strip()) < 3:
            raise PydanticCustomError(
                "username_too_short",
                "Username must be at least 3 characters",
                {"min_length": 3},
            )
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < 4:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least 4 characters",
                {"min_length": 4},
            )
        return value


class LoginRequestDTO(BaseModel):
    # No shape rules on login; any mismatch surfaces as invalid credentials
    username: str = ""
    password: str = ""


class MessageDTO(BaseModel):
    message: str


class LoginSuccessDTO(MessageDTO):
    token: str
