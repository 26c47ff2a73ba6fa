from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest

from portfolio_api.domain.accounts.entities import Account
from portfolio_api.infrastructure.db.session import Database
from portfolio_api.infrastructure.repositories.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
)
from portfolio_api.infrastructure.repositories.sqlalchemy_document_store import (
    SqlAlchemyDocumentStore,
)
from portfolio_api.shared.config import AppConfig
from portfolio_api.shared.errors.base import ConflictError


@pytest.fixture()
def database(app_config: AppConfig) -> Iterator[Database]:
    db = Database(app_config)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture()
def store(database: Database) -> SqlAlchemyDocumentStore:
    return SqlAlchemyDocumentStore(database)


def test_insert_and_find(store: SqlAlchemyDocumentStore) -> None:
    document_id = store.insert("skills", {"name": "Python", "level": 5, "_id": "ignored"})

    assert len(document_id) == 32
    assert store.find_one("skills", document_id) == {
        "_id": document_id,
        "name": "Python",
        "level": 5,
    }
    assert store.find_all("skills") == [{"_id": document_id, "name": "Python", "level": 5}]


def test_collections_are_isolated(store: SqlAlchemyDocumentStore) -> None:
    document_id = store.insert("skills", {"name": "Python"})

    assert store.find_all("projects") == []
    assert store.find_one("projects", document_id) is None
    assert store.update("projects", document_id, {"name": "x"}) is False
    assert store.delete("projects", document_id) is False
    assert store.find_one("skills", document_id) is not None


def test_update_merges_and_reports_match(store: SqlAlchemyDocumentStore) -> None:
    document_id = store.insert("experience", {"company": "Acme", "role": "Dev"})

    assert store.update("experience", document_id, {"role": "Lead", "_id": "other"}) is True
    assert store.find_one("experience", document_id) == {
        "_id": document_id,
        "company": "Acme",
        "role": "Lead",
    }
    assert store.update("experience", "0" * 32, {"role": "CTO"}) is False


def test_delete(store: SqlAlchemyDocumentStore) -> None:
    document_id = store.insert("education", {"school": "MIT"})

    assert store.delete("education", document_id) is True
    assert store.delete("education", document_id) is False
    assert store.find_one("education", document_id) is None


def test_find_all_newest_first(store: SqlAlchemyDocumentStore) -> None:
    store.insert("contacts", {"n": 1})
    store.insert("contacts", {"n": 2})
    store.insert("contacts", {"n": 3})

    assert [d["n"] for d in store.find_all("contacts")] == [1, 2, 3]
    assert [d["n"] for d in store.find_all("contacts", newest_first=True)] == [3, 2, 1]


def test_singleton_upsert_and_replace(store: SqlAlchemyDocumentStore) -> None:
    assert store.find_singleton("homePage") is None

    store.replace_singleton("homePage", {"headline": "Hi", "bio": "Dev"})
    first = store.find_singleton("homePage")
    store.replace_singleton("homePage", {"headline": "Hello"})
    second = store.find_singleton("homePage")

    assert first is not None and second is not None
    assert first["headline"] == "Hi"
    assert second == {"_id": first["_id"], "headline": "Hello"}
    assert len(store.find_all("homePage")) == 1


def test_account_repository_round_trip(database: Database) -> None:
    accounts = SqlAlchemyAccountRepository(database)
    created = accounts.add(
        Account(id="", username="admin", password_hash="$2b$hash", created_at=datetime.now(UTC))
    )

    found = accounts.find_by_username("admin")

    assert created.id
    assert found is not None
    assert found.id == created.id
    assert found.password_hash == "$2b$hash"
    assert accounts.find_by_username("ADMIN") is None


def test_account_repository_enforces_unique_username(database: Database) -> None:
    accounts = SqlAlchemyAccountRepository(database)
    account = Account(id="", username="admin", password_hash="h", created_at=datetime.now(UTC))
    accounts.add(account)

    with pytest.raises(ConflictError):
        accounts.add(account)
