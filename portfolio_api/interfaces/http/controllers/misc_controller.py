# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, abort, jsonify, send_from_directory

from portfolio_api.infrastructure.db.session import Database


class MiscController:
    def __init__(self, *, database: Database) -> None:
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            self._database.check()
            status["database"] = "ok"
        except Exception as exc:  # pragma: no cover
            status["ok"] = False
            status["database"] = f"error: {type(exc).__name__}"
        return jsonify(status)


class FrontendController:
    """Serves the built single-page frontend, falling back to index.html."""

    def __init__(self, *, static_dir: Path) -> None:
        self._static_dir = static_dir.resolve()

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("frontend", __name__)
        bp.add_url_rule("/", "index", view_func=self.serve, defaults={"path": ""})
        bp.add_url_rule("/<path:path>", "serve", view_func=self.serve)
        return bp

    def serve(self, path: str):
        if path.startswith("api/"):
            abort(404)
        if path and (self._static_dir / path).is_file():
            return send_from_directory(self._static_dir, path)
        return send_from_directory(self._static_dir, "index.html")
