from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from socmed.application.use_cases.users.login_user import LoginUserUseCase
from socmed.application.use_cases.users.register_user import \
    RegisterUserUseCase
from socmed.domain.users.entities import (LoginCommand, LoginResult,
                                          RegistrationCommand, UserAccount)
from socmed.domain.users.exceptions import (EmailAlreadyRegisteredError,
                                            InvalidCredentialsError,
                                            PasswordMismatchError,
                                            UserStoreError)
from socmed.interfaces.http.controllers.auth_controller import AuthController
from socmed.interfaces.http.controllers.misc_controller import MiscController
from socmed.shared.middleware.error_handler import configure_error_handling

REGISTER_BODY = {
    "name": "Ann",
    "email": "ann@x.com",
    "password": "secret1",
    "password_confirm": "secret1",
    "gender": "F",
}


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _mount(
    app: Flask, *, register: object | None = None, login: object | None = None
) -> None:
    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, register or MagicMock()),
        login_use_case=cast(LoginUserUseCase, login or MagicMock()),
    )
    app.register_blueprint(controller.as_blueprint())


def test_register_endpoint_returns_created(flask_app: Flask) -> None:
    received: dict[str, RegistrationCommand] = {}

    class StubRegister:
        def execute(self, command: RegistrationCommand) -> UserAccount:
            received["command"] = command
            return UserAccount(
                id=1,
                name=command.name,
                email=command.email,
                password_hash="hash",
                gender=command.gender,
            )

    _mount(flask_app, register=StubRegister())

    with flask_app.test_client() as client:
        response = client.post("/api/register", json=REGISTER_BODY)

    assert response.status_code == 201
    assert response.get_json() == {
        "status": 201,
        "message": "Register successfully, please login",
    }
    assert received["command"] == RegistrationCommand(**REGISTER_BODY)


@pytest.mark.parametrize(
    ("error", "status", "message"),
    [
        (EmailAlreadyRegisteredError(), 400, "email already registered"),
        (PasswordMismatchError(), 400, "password not match"),
        (UserStoreError("add"), 500, "internal server error"),
    ],
)
def test_register_renders_classified_errors(
    flask_app: Flask, error: Exception, status: int, message: str
) -> None:
    register = MagicMock()
    register.execute.side_effect = error
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post("/api/register", json=REGISTER_BODY)

    assert response.status_code == status
    assert response.get_json() == {"status": status, "message": message}


def test_register_missing_fields_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post("/api/register", json={"name": "Ann", "email": "ann@x.com"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["status"] == 400
    assert "password" in payload["message"]
    assert "gender" in payload["message"]
    register.execute.assert_not_called()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"data": "not json", "content_type": "application/json"},
        {"json": ["a", "list"]},
        {"json": {**REGISTER_BODY, "password": 123456}},
    ],
)
def test_register_malformed_body_returns_400(flask_app: Flask, kwargs: dict) -> None:
    _mount(flask_app)

    with flask_app.test_client() as client:
        response = client.post("/api/register", **kwargs)

    assert response.status_code == 400
    assert response.get_json()["status"] == 400


def test_login_endpoint_returns_token(flask_app: Flask) -> None:
    class StubLogin:
        def execute(self, command: LoginCommand) -> LoginResult:
            assert command == LoginCommand(email="ann@x.com", password="secret1")
            return LoginResult(id=1, name="Ann", token="token123")

    _mount(flask_app, login=StubLogin())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/login", json={"email": "ann@x.com", "password": "secret1"}
        )

    assert response.status_code == 200
    assert response.get_json() == {"status": 200, "id": 1, "name": "Ann", "token": "token123"}


def test_login_invalid_credentials_returns_404(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"email": "ann@x.com", "password": "x"})

    assert response.status_code == 404
    assert response.get_json() == {"status": 404, "message": "wrong email or password"}


def test_unexpected_exception_is_generic_500(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("connection string leaked here")
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"email": "ann@x.com", "password": "x"})

    assert response.status_code == 500
    assert response.get_json() == {"status": 500, "message": "internal server error"}


def test_ping(flask_app: Flask) -> None:
    flask_app.register_blueprint(MiscController().as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.get_json() == {"message": "pong"}


@pytest.mark.parametrize(
    ("path", "body", "field"),
    [
        ("/api/register", {**REGISTER_BODY, "password": "\ud800", "password_confirm": "\ud800"}, "password"),
        ("/api/register", {**REGISTER_BODY, "name": "Ann\udfff"}, "name"),
        ("/api/login", {"email": "\ud800@x.com", "password": "secret1"}, "email"),
        ("/api/login", {"email": "ann@x.com", "password": "\ud800"}, "password"),
    ],
)
def test_lone_surrogates_are_invalid_input(
    flask_app: Flask, path: str, body: dict[str, str], field: str
) -> None:
    register = MagicMock()
    login = MagicMock()
    _mount(flask_app, register=register, login=login)

    with flask_app.test_client() as client:
        response = client.post(path, json=body)

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["status"] == 400
    assert field in payload["message"]
    register.execute.assert_not_called()
    login.execute.assert_not_called()
