# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from portfolio_api.domain.accounts.entities import Account
from portfolio_api.domain.accounts.repositories import AccountRepository
from portfolio_api.infrastructure.db.models import AccountRow
from portfolio_api.infrastructure.db.session import Database
from portfolio_api.shared.errors.base import ConflictError
from portfolio_api.shared.logging import logger


def _to_domain(row: AccountRow) -> Account:
    return Account(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def find_by_username(self, username: str) -> Account | None:
        with self._database.session_scope() as session:
            row = session.query(AccountRow).filter(AccountRow.username == username).first()
            if not row:
                return None
            return _to_domain(row)

    def add(self, account: Account) -> Account:
        try:
            with self._database.session_scope() as session:
                row = AccountRow(
                    username=account.username,
                    password_hash=account.password_hash,
                    created_at=account.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info(f"accounts.add: username taken (username={account.username})")
            raise ConflictError("Username already taken", field="username") from exc
