# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from portfolio_api.container import Container
from portfolio_api.interfaces.http.controllers.misc_controller import FrontendController
from portfolio_api.shared.config import AppConfig, load_config
from portfolio_api.shared.logging import logger, setup_logging
from portfolio_api.shared.middleware.error_handler import configure_error_handling
from portfolio_api.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)

    container = Container(config)
    container.database.init_db()

    app = Flask(__name__, static_folder=None)
    app.config["MAX_CONTENT_LENGTH"] = config.max_content_length
    app.extensions["container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(app, resources={r"/api/*": {"origins": config.origins()}})

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    for controller in container.content_controllers:
        app.register_blueprint(controller.as_blueprint())
    for singleton in container.singleton_controllers:
        app.register_blueprint(singleton.as_blueprint())
    app.register_blueprint(container.contact_controller.as_blueprint())

    if config.is_production():
        if config.static_dir.is_dir():
            app.register_blueprint(FrontendController(static_dir=config.static_dir).as_blueprint())
            logger.info(f"Serving frontend from {config.static_dir}")
        else:
            logger.warning(f"Frontend build not found at {config.static_dir}, not serving it")

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server running on port {config.port}")
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
