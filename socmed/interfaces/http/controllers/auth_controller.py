# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from socmed.application.use_cases.users.login_user import LoginUserUseCase
from socmed.application.use_cases.users.register_user import \
    RegisterUserUseCase
from socmed.interfaces.http.dto.auth import (LoginRequestDTO, LoginSuccessDTO,
                                             RegisterRequestDTO,
                                             RegisterSuccessDTO)
from socmed.shared.errors.base import ValidationError as RequestValidationError
from socmed.shared.errors.validation import raise_validation_error


def _json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise RequestValidationError("request body must be a JSON object")
    return payload


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        self._register_use_case.execute(dto.to_command())

        payload = RegisterSuccessDTO().model_dump()
        return jsonify(payload), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._login_use_case.execute(dto.to_command())

        payload = LoginSuccessDTO.from_result(result).model_dump()
        return jsonify(payload), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
