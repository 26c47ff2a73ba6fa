# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from pathlib import Path

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "secret", "changeme")

# Sibling of the project checkout, matching the frontend build layout
_DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[3].parent / "frontend" / "build"


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field(alias="JWT_SECRET", min_length=1)
    database_url: str = Field(alias="DATABASE_URL", min_length=1)
    database_pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")

    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3001, ge=1, le=65535, alias="PORT")

    token_ttl_seconds: int = Field(7200, ge=1, alias="TOKEN_TTL_SECONDS")
    bcrypt_rounds: int = Field(10, ge=4, le=16, alias="BCRYPT_ROUNDS")

    # Comma separated, "*" allows any origin
    allowed_origins: str = Field("*", alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    static_dir: Path = Field(_DEFAULT_STATIC_DIR, alias="STATIC_DIR")
    max_content_length: int = Field(100 * 1024, ge=1, alias="MAX_CONTENT_LENGTH")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )

    @field_validator("enable_hsts", "debug_logging", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in _INSECURE_SECRETS or len(self.secret_key) < 16:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   JWT_SECRET must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if "*" in self.origins():
            print(
                "\n⚠️  PRODUCTION SECURITY WARNING: CORS allows wildcard (*) origins\n",
                file=sys.stderr,
            )
        return self

    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


def load_config() -> AppConfig:
    """Build the process configuration once at startup.

    Exits the process when a required variable is missing; there is no
    degraded mode without a signing secret or a database.
    """
    try:
        return AppConfig()  # type: ignore[call-arg]
    except ValidationError as exc:
        missing = sorted(
            str(err["loc"][0]) for err in exc.errors() if err.get("type") == "missing"
        )
        print("Missing required environment variables", file=sys.stderr)
        if missing:
            print(f"   {', '.join(missing)}", file=sys.stderr)
        else:
            print(f"   {exc}", file=sys.stderr)
        sys.exit(1)


__all__ = ["AppConfig", "load_config"]
