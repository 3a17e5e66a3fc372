# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from socmed.infrastructure.health import check_database
from socmed.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/ping", view_func=self.ping, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def ping(self):
        return jsonify({"message": "pong"})

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database()
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed error={type(exc).__name__}")
            status["ok"] = False
            status["database"] = "error"
            return jsonify(status), HTTPStatus.SERVICE_UNAVAILABLE
        return jsonify(status)
