from __future__ import annotations

import re
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


# Schemes that only make sense with a host part
_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def is_valid_url(value: str) -> bool:
    """Absolute URL check: any scheme, plus a host for the web schemes."""
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    if not parsed.scheme:
        return False
    if parsed.scheme.lower() in _HOST_SCHEMES:
        return bool(parsed.hostname) and not any(c.isspace() for c in parsed.netloc)
    return True


class ProjectRequestDTO(BaseModel):
    """Checks the fields a new project needs; other fields pass through untouched."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str | None = Field(None, validate_default=True)
    description: str | None = Field(None, validate_default=True)
    github_url: str | None = Field(None, alias="githubUrl")

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str | None) -> str | None:
        if len((value or "").strip()) < 3:
            raise PydanticCustomError(
                "title_too_short", "Title must be at least 3 characters", {"min_length": 3}
            )
        return value

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        if len((value or "").strip()) < 10:
            raise PydanticCustomError(
                "description_too_short",
                "Description must be at least 10 characters",
                {"min_length": 10},
            )
        return value

    @field_validator("github_url")
    @classmethod
    def validate_github_url(cls, value: str | None) -> str | None:
        if value and not is_valid_url(value):
            raise PydanticCustomError("url_invalid", "Invalid GitHub URL", {})
        return value


class ContactMessageDTO(BaseModel):
    name: str | None = None
    email: str | None = None
    message: str | None = None

    @model_validator(mode="after")
    def _validate(self) -> "ContactMessageDTO":
        if not self.name or not self.email or not self.message:
            raise PydanticCustomError("missing", "All fields are required", {})

        if len(self.name) > 100 or len(self.email) > 100 or len(self.message) > 1000:
            raise PydanticCustomError("too_long", "Input too long", {})

        if not EMAIL_RE.match(self.email or ""):
            raise PydanticCustomError("email_invalid", "Invalid email format", {})

        return self

    def to_document(self) -> dict[str, str]:
        return {
            "name": (self.name or "").strip(),
            "email": (self.email or "").strip().lower(),
            "message": (self.message or "").strip(),
        }
