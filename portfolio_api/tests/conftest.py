from __future__ import annotations

from pathlib import Path

import pytest

from portfolio_api.shared.config import AppConfig

TEST_SECRET = "test-signing-secret-0123456789abcdef"


def make_config(tmp_path: Path, **overrides: object) -> AppConfig:
    values: dict[str, object] = {
        "JWT_SECRET": TEST_SECRET,
        "DATABASE_URL": f"sqlite:///{tmp_path / 'portfolio.db'}",
        "BCRYPT_ROUNDS": 4,
        "APP_ENV": "test",
    }
    values.update(overrides)
    return AppConfig(_env_file=None, **values)  # type: ignore[arg-type]


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return make_config(tmp_path)


@pytest.fixture()
def config_factory(tmp_path: Path):
    def _factory(**overrides: object) -> AppConfig:
        return make_config(tmp_path, **overrides)

    return _factory
