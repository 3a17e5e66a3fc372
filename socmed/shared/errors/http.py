# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from .base import INTERNAL_FAULT_MESSAGE, AppError, ErrorKind
from socmed.shared.config import load_config
from socmed.shared.logging import logger


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(
    app: Flask, *, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:
    config = load_config()
    debug_mode = config.debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.kind is ErrorKind.INTERNAL_FAULT:
            logger.opt(exception=exc).error(
                f"Internal fault on {request.method} {request.path}: {exc.message}"
            )
        else:
            logger.warning(
                f"Handled {exc.kind} error on {request.method} {request.path}: {exc.message}"
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        response = jsonify({"status": int(default_status), "message": INTERNAL_FAULT_MESSAGE})
        return response, default_status
