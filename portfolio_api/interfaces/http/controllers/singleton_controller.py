# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from portfolio_api.domain.content.collections import SingletonCollection
from portfolio_api.domain.content.repositories import DocumentStore
from portfolio_api.infrastructure.audit import AuditAction, audit_log
from portfolio_api.interfaces.http.auth import AuthGuard
from portfolio_api.interfaces.http.context import RequestContext
from portfolio_api.interfaces.http.controllers.content_controller import utc_timestamp
from portfolio_api.shared.errors import StoreError
from portfolio_api.shared.logging import logger


class SingletonController:
    def __init__(
        self,
        collection: SingletonCollection,
        *,
        store: DocumentStore,
        guard: AuthGuard,
    ) -> None:
        self._collection = collection
        self._store = store
        self._guard = guard

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint(f"singleton_{self._collection.name}", __name__, url_prefix="/api")
        route = f"/{self._collection.route}"
        bp.add_url_rule(route, "get", view_func=self.get, methods=["GET"])
        bp.add_url_rule(route, "replace", view_func=self._guard(self.replace), methods=["PUT"])
        return bp

    def get(self):
        try:
            document = self._store.find_singleton(self._collection.name)
        except Exception as exc:
            logger.exception(f"{self._collection.name}.get: err")
            raise StoreError(f"Failed to fetch {self._collection.title}") from exc
        return jsonify(document or {})

    def replace(self, ctx: RequestContext):
        document = {**ctx.body, "updatedAt": utc_timestamp()}
        try:
            self._store.replace_singleton(self._collection.name, document)
        except Exception as exc:
            logger.exception(f"{self._collection.name}.replace: err")
            raise StoreError(f"Failed to update {self._collection.title}") from exc

        audit_log(
            AuditAction.CONTENT_UPDATED,
            account_id=ctx.account_id,
            ip_address=ctx.remote_addr,
            details={"collection": self._collection.name},
        )
        title = self._collection.title
        return jsonify({"message": f"{title[0].upper()}{title[1:]} updated successfully"})
