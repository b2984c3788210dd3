# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from messagely.infrastructure.container import Container
from messagely.infrastructure.db import init_db
from messagely.shared.config import AppConfig, load_config
from messagely.shared.logging import logger, setup_logging
from messagely.shared.middleware.error_handler import configure_error_handling
from messagely.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    """Build the Flask application.

    ``config`` drives logging, error handling, request logging, CORS, security
    headers and the container. The database engine is bound once at import of
    ``messagely.infrastructure.db`` from the environment (``DATABASE_URL``), so
    ``config.database`` does not rebind it.
    """

    config = config or load_config()
    container = container or Container(config)

    setup_logging(level="DEBUG" if config.debug_logging else config.log_level)
    init_db()

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    configure_error_handling(app, config)
    configure_request_logging(app, config)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}},
        "allow_headers": ["Authorization", "Content-Type", "X-Request-ID"],
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.messages_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
