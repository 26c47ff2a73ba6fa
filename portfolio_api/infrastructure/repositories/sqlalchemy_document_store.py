# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Schema-less JSON documents grouped into named collections."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.domain.content.repositories import Document, DocumentStore
from portfolio_api.infrastructure.db.models import DocumentRow
from portfolio_api.infrastructure.db.session import Database

ID_FIELD = "_id"


def _payload(data: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k != ID_FIELD}


def _to_document(row: DocumentRow) -> Document:
    return {ID_FIELD: row.id, **(row.data or {})}


def _get_row(session: Session, collection: str, document_id: str) -> DocumentRow | None:
    row = session.get(DocumentRow, document_id)
    if row is None or row.collection != collection:
        return None
    return row


class SqlAlchemyDocumentStore(DocumentStore):
    def __init__(self, database: Database) -> None:
        self._database = database

    def find_all(self, collection: str, *, newest_first: bool = False) -> list[Document]:
        order = DocumentRow.created_at.desc() if newest_first else DocumentRow.created_at.asc()
        with self._database.session_scope() as session:
            rows = (
                session.query(DocumentRow)
                .filter(DocumentRow.collection == collection)
                .order_by(order)
                .all()
            )
            return [_to_document(row) for row in rows]

    def find_one(self, collection: str, document_id: str) -> Document | None:
        with self._database.session_scope() as session:
            row = _get_row(session, collection, document_id)
            return _to_document(row) if row else None

    def insert(self, collection: str, data: Mapping[str, Any]) -> str:
        with self._database.session_scope() as session:
            row = DocumentRow(collection=collection, data=_payload(data))
            session.add(row)
            session.flush()
            return row.id

    def update(self, collection: str, document_id: str, changes: Mapping[str, Any]) -> bool:
        with self._database.session_scope() as session:
            row = _get_row(session, collection, document_id)
            if row is None:
                return False
            # Reassign so the JSON column registers the change
            row.data = {**(row.data or {}), **_payload(changes)}
            return True

    def delete(self, collection: str, document_id: str) -> bool:
        with self._database.session_scope() as session:
            row = _get_row(session, collection, document_id)
            if row is None:
                return False
            session.delete(row)
            return True

    def find_singleton(self, collection: str) -> Document | None:
        with self._database.session_scope() as session:
            row = self._first(session, collection)
            return _to_document(row) if row else None

    def replace_singleton(self, collection: str, data: Mapping[str, Any]) -> None:
        with self._database.session_scope() as session:
            row = self._first(session, collection)
            if row is None:
                session.add(DocumentRow(collection=collection, data=_payload(data)))
            else:
                row.data = _payload(data)

    @staticmethod
    def _first(session: Session, collection: str) -> DocumentRow | None:
        return (
            session.query(DocumentRow)
            .filter(DocumentRow.collection == collection)
            .order_by(DocumentRow.created_at.asc())
            .first()
        )
