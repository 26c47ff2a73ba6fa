from __future__ import annotations

from pathlib import Path

import pytest

from portfolio_api.app import create_app
from portfolio_api.shared.config import load_config


def test_missing_required_variables_exit(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JWT_SECRET", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        load_config()

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Missing required environment variables" in err
    assert "JWT_SECRET" in err
    assert "DATABASE_URL" in err


def test_load_config_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("JWT_SECRET", "env-signing-secret-0123456789abcdef")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENABLE_HSTS", "true")

    config = load_config()

    assert config.secret_key == "env-signing-secret-0123456789abcdef"
    assert config.port == 8080
    assert config.enable_hsts is True
    assert config.token_ttl_seconds == 7200
    assert config.bcrypt_rounds == 10


def test_production_refuses_weak_secret(config_factory) -> None:
    with pytest.raises(SystemExit):
        config_factory(APP_ENV="production", JWT_SECRET="secret")


def test_origins_are_split_and_trimmed(config_factory) -> None:
    config = config_factory(ALLOWED_ORIGINS=" https://a.example , https://b.example ,")

    assert config.origins() == ["https://a.example", "https://b.example"]


def test_production_serves_frontend(tmp_path: Path, config_factory) -> None:
    build = tmp_path / "build"
    build.mkdir()
    (build / "index.html").write_text("<html>portfolio</html>")
    (build / "app.js").write_text("console.log('hi')")
    config = config_factory(
        APP_ENV="production",
        STATIC_DIR=str(build),
        ALLOWED_ORIGINS="https://portfolio.example",
        ENABLE_HSTS="1",
    )
    app = create_app(config)

    with app.test_client() as client:
        index = client.get("/")
        assert b"portfolio" in index.data
        assert "Strict-Transport-Security" in index.headers
        assert b"portfolio" in client.get("/admin/dashboard").data
        assert b"console.log" in client.get("/app.js").data
        assert client.get("/api/unknown").status_code == 404

    app.extensions["container"].database.dispose()


def test_default_static_dir_does_not_depend_on_cwd(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, config_factory
) -> None:
    import portfolio_api

    monkeypatch.chdir(tmp_path)
    config = config_factory()

    project_root = Path(portfolio_api.__file__).resolve().parents[1]
    assert config.static_dir.is_absolute()
    assert config.static_dir == project_root.parent / "frontend" / "build"


def test_oversized_body_is_rejected(config_factory) -> None:
    app = create_app(config_factory(MAX_CONTENT_LENGTH=1024))

    with app.test_client() as client:
        response = client.post(
            "/api/contact",
            json={"name": "Ada", "email": "ada@example.com", "message": "m" * 4096},
        )

    assert response.status_code == 413
    app.extensions["container"].database.dispose()
