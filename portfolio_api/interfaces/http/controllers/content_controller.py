# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""CRUD endpoints for the list-shaped portfolio collections."""

from __future__ import annotations

from datetime import UTC, datetime
from time import perf_counter

from flask import Blueprint, jsonify
from pydantic import ValidationError

from portfolio_api.domain.content.collections import PROJECTS, ContentCollection
from portfolio_api.domain.content.repositories import DocumentStore
from portfolio_api.infrastructure.audit import AuditAction, audit_log
from portfolio_api.interfaces.http.auth import AuthGuard
from portfolio_api.interfaces.http.context import RequestContext
from portfolio_api.interfaces.http.dto.content import ProjectRequestDTO
from portfolio_api.shared.errors import NotFoundError, StoreError
from portfolio_api.shared.errors.validation import raise_validation_error
from portfolio_api.shared.logging import logger


def utc_timestamp() -> str:
    return datetime.now(UTC).isoformat()


class ContentController:
    def __init__(
        self,
        collection: ContentCollection,
        *,
        store: DocumentStore,
        guard: AuthGuard,
    ) -> None:
        self._collection = collection
        self._store = store
        self._guard = guard

    @property
    def _name(self) -> str:
        return self._collection.name

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint(f"content_{self._name}", __name__, url_prefix="/api")
        route = f"/{self._collection.route}"
        item_route = f"{route}/<document_id>"
        bp.add_url_rule(route, "list", view_func=self.list_documents, methods=["GET"])
        bp.add_url_rule(item_route, "get", view_func=self.get_document, methods=["GET"])
        bp.add_url_rule(route, "create", view_func=self._guard(self.create), methods=["POST"])
        bp.add_url_rule(
            item_route, "update", view_func=self._guard(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            item_route, "delete", view_func=self._guard(self.delete), methods=["DELETE"]
        )
        return bp

    def list_documents(self):
        t0 = perf_counter()
        try:
            items = self._store.find_all(self._name)
        except Exception as exc:
            logger.exception(f"{self._name}.list: err")
            raise StoreError(f"Failed to fetch {self._collection.plural}") from exc

        dt = (perf_counter() - t0) * 1000
        logger.debug(f"{self._name}.list: ok (n={len(items)}, dt_ms={dt:.0f})")
        return jsonify(items)

    def get_document(self, document_id: str):
        try:
            item = self._store.find_one(self._name, document_id)
        except Exception as exc:
            logger.exception(f"{self._name}.get: err (id={document_id})")
            raise StoreError(f"Failed to fetch {self._collection.label.lower()}") from exc

        if item is None:
            logger.info(f"{self._name}.get: not_found (id={document_id})")
            raise NotFoundError(self._collection.label)
        return jsonify(item)

    def create(self, ctx: RequestContext):
        if self._collection is PROJECTS:
            try:
                ProjectRequestDTO.model_validate(ctx.body)
            except ValidationError as exc:
                raise_validation_error(exc)

        document = dict(ctx.body)
        if self._collection.stamp_owner:
            document["userId"] = ctx.account_id
        if self._collection.stamp_created_at:
            document["createdAt"] = utc_timestamp()

        try:
            document_id = self._store.insert(self._name, document)
        except Exception as exc:
            logger.exception(f"{self._name}.create: err (account_id={ctx.account_id})")
            raise StoreError(
                f"Failed to {self._collection.create_verb} {self._collection.label.lower()}"
            ) from exc

        logger.info(f"{self._name}.create: ok (account_id={ctx.account_id}, id={document_id})")
        audit_log(
            AuditAction.CONTENT_CREATED,
            account_id=ctx.account_id,
            ip_address=ctx.remote_addr,
            details={"collection": self._name, "id": document_id},
        )
        payload = {
            "message": f"{self._collection.label} {self._collection.created_word} successfully",
            "id": document_id,
        }
        return jsonify(payload), self._collection.create_status

    def update(self, document_id: str, ctx: RequestContext):
        try:
            matched = self._store.update(self._name, document_id, ctx.body)
        except Exception as exc:
            logger.exception(f"{self._name}.update: err (id={document_id})")
            raise StoreError(f"Failed to update {self._collection.label.lower()}") from exc

        if not matched:
            logger.info(f"{self._name}.update: not_found (id={document_id})")
            raise NotFoundError(self._collection.label)

        audit_log(
            AuditAction.CONTENT_UPDATED,
            account_id=ctx.account_id,
            ip_address=ctx.remote_addr,
            details={"collection": self._name, "id": document_id, "fields": sorted(ctx.body)},
        )
        return jsonify({"message": f"{self._collection.label} updated successfully"})

    def delete(self, document_id: str, ctx: RequestContext):
        try:
            deleted = self._store.delete(self._name, document_id)
        except Exception as exc:
            logger.exception(f"{self._name}.delete: err (id={document_id})")
            raise StoreError(f"Failed to delete {self._collection.label.lower()}") from exc

        if not deleted:
            logger.info(f"{self._name}.delete: not_found (id={document_id})")
            raise NotFoundError(self._collection.label)

        audit_log(
            AuditAction.CONTENT_DELETED,
            account_id=ctx.account_id,
            ip_address=ctx.remote_addr,
            details={"collection": self._name, "id": document_id},
        )
        return jsonify({"message": f"{self._collection.label} deleted successfully"})
