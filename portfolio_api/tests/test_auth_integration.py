from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from portfolio_api.app import create_app
from portfolio_api.shared.config import AppConfig

CREDENTIALS = {"username": "admin", "password": "secret"}


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(app_config)
    yield flask_app
    flask_app.extensions["container"].database.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def _login(client: FlaskClient) -> str:
    response = client.post("/api/auth/login", json=CREDENTIALS)
    assert response.status_code == 200
    return response.get_json()["token"]


def test_register_login_and_protected_read(client: FlaskClient) -> None:
    register = client.post("/api/auth/register", json=CREDENTIALS)
    assert register.status_code == 200
    assert "token" not in register.get_json()

    token = _login(client)

    contacts = client.get("/api/contacts", headers={"Authorization": f"Bearer {token}"})
    assert contacts.status_code == 200
    assert contacts.get_json() == []

    truncated = client.get(
        "/api/contacts", headers={"Authorization": f"Bearer {token[:-1]}"}
    )
    assert truncated.status_code == 403
    assert truncated.get_json() == {"error": "Invalid or expired token"}

    anonymous = client.get("/api/contacts")
    assert anonymous.status_code == 401
    assert anonymous.get_json() == {"error": "Access denied. No token."}


def test_duplicate_registration_is_rejected(client: FlaskClient) -> None:
    assert client.post("/api/auth/register", json=CREDENTIALS).status_code == 200

    again = client.post(
        "/api/auth/register", json={"username": "admin", "password": "different"}
    )

    assert again.status_code == 400
    assert again.get_json() == {"error": "User already exists"}


def test_bad_password_and_unknown_user_look_the_same(client: FlaskClient) -> None:
    client.post("/api/auth/register", json=CREDENTIALS)

    wrong_password = client.post(
        "/api/auth/login", json={"username": "admin", "password": "nope"}
    )
    unknown_user = client.post(
        "/api/auth/login", json={"username": "ghost", "password": "secret"}
    )

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.get_json() == unknown_user.get_json() == {"error": "Invalid credentials"}


def test_two_logins_give_distinct_valid_tokens(client: FlaskClient) -> None:
    client.post("/api/auth/register", json=CREDENTIALS)

    first = _login(client)
    second = _login(client)

    assert first != second
    for token in (first, second):
        response = client.get("/api/contacts", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200


def test_admin_manages_projects_end_to_end(client: FlaskClient) -> None:
    client.post("/api/auth/register", json=CREDENTIALS)
    headers = {"Authorization": f"Bearer {_login(client)}"}

    created = client.post(
        "/api/projects",
        json={"title": "Portfolio", "description": "Personal site with an admin panel"},
        headers=headers,
    )
    assert created.status_code == 201
    project_id = created.get_json()["id"]

    (listed,) = client.get("/api/projects").get_json()
    assert listed["_id"] == project_id
    assert listed["userId"]

    updated = client.put(f"/api/projects/{project_id}", json={"title": "New"}, headers=headers)
    assert updated.status_code == 200
    assert client.get(f"/api/projects/{project_id}").get_json()["title"] == "New"

    deleted = client.delete(f"/api/projects/{project_id}", headers=headers)
    assert deleted.status_code == 200
    assert client.get(f"/api/projects/{project_id}").status_code == 404


def test_contact_message_reaches_admin_inbox(client: FlaskClient) -> None:
    client.post("/api/auth/register", json=CREDENTIALS)
    headers = {"Authorization": f"Bearer {_login(client)}"}

    sent = client.post(
        "/api/contact",
        json={"name": "Ada", "email": "ADA@example.com", "message": "Let's talk"},
    )
    assert sent.status_code == 200

    (message,) = client.get("/api/contacts", headers=headers).get_json()
    assert message["email"] == "ada@example.com"


def test_homepage_singleton(client: FlaskClient) -> None:
    client.post("/api/auth/register", json=CREDENTIALS)
    headers = {"Authorization": f"Bearer {_login(client)}"}

    assert client.get("/api/homepage").get_json() == {}
    updated = client.put("/api/homepage", json={"headline": "Hi, I build things"}, headers=headers)

    assert updated.get_json() == {"message": "Home page updated successfully"}
    assert client.get("/api/homepage").get_json()["headline"] == "Hi, I build things"


def test_health_and_security_headers(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.get_json() == {"ok": True, "database": "ok"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_request_id_is_echoed(client: FlaskClient) -> None:
    tagged = client.get("/api/health", headers={"X-Request-ID": "req-123"})
    untagged = client.get("/api/health")

    assert tagged.headers["X-Request-ID"] == "req-123"
    assert untagged.headers["X-Request-ID"] not in ("", "-", "req-123")
