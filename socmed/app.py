# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import importlib
from typing import Any, Protocol, cast

from flask import Flask, Response

from socmed.infrastructure.container import Container, container
from socmed.infrastructure.db import init_db
from socmed.shared.config import load_config
from socmed.shared.logging import logger, setup_logging
from socmed.shared.middleware.error_handler import configure_error_handling
from socmed.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


_config = load_config()


def create_app(app_container: Container | None = None) -> Flask:
    app_container = app_container or container

    setup_logging(debug_mode=_config.debug_logging)
    init_db()

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": _config.security.allowed_origins}}
    }
    if any(o != "*" for o in _config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(app_container.misc_controller.as_blueprint())
    app.register_blueprint(app_container.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=_config.port, debug=True)
