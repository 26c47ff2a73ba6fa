# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from pydantic import ValidationError

from portfolio_api.domain.content.collections import CONTACT_MESSAGES
from portfolio_api.domain.content.repositories import DocumentStore
from portfolio_api.interfaces.http.auth import AuthGuard
from portfolio_api.interfaces.http.context import RequestContext, current_context
from portfolio_api.interfaces.http.controllers.content_controller import utc_timestamp
from portfolio_api.interfaces.http.dto.content import ContactMessageDTO
from portfolio_api.shared.errors import StoreError
from portfolio_api.shared.errors.validation import raise_validation_error
from portfolio_api.shared.logging import logger


class ContactController:
    """Visitor messages: anyone may send one, only the admin may read them."""

    def __init__(self, *, store: DocumentStore, guard: AuthGuard) -> None:
        self._store = store
        self._guard = guard

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("contact", __name__, url_prefix="/api")
        bp.add_url_rule("/contact", "send", view_func=self.send_message, methods=["POST"])
        bp.add_url_rule(
            "/contacts", "list", view_func=self._guard(self.list_messages), methods=["GET"]
        )
        return bp

    def send_message(self):
        ctx = current_context()
        try:
            dto = ContactMessageDTO.model_validate(ctx.body)
        except ValidationError as exc:
            raise_validation_error(exc)

        document = {**dto.to_document(), "createdAt": utc_timestamp()}
        try:
            message_id = self._store.insert(CONTACT_MESSAGES, document)
        except Exception as exc:
            logger.exception("contact.send: err")
            raise StoreError("Failed to send message") from exc

        logger.info(f"contact.send: ok (id={message_id}, from={ctx.remote_addr})")
        return jsonify({"message": "Message sent successfully"})

    def list_messages(self, ctx: RequestContext):
        try:
            items = self._store.find_all(CONTACT_MESSAGES, newest_first=True)
        except Exception as exc:
            logger.exception(f"contact.list: err (account_id={ctx.account_id})")
            raise StoreError("Failed to fetch contacts") from exc
        return jsonify(items)
