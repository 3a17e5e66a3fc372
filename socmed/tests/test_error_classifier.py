from __future__ import annotations

from http import HTTPStatus

import pytest

from socmed.domain.users.exceptions import (EmailAlreadyRegisteredError,
                                            InvalidCredentialsError,
                                            InvalidTokenError,
                                            PasswordHashingError,
                                            PasswordMismatchError,
                                            UserStoreError)
from socmed.shared.errors.base import (INTERNAL_FAULT_MESSAGE, AppError,
                                       ErrorKind, status_for)


@pytest.mark.parametrize(
    ("kind", "status"),
    [
        (ErrorKind.INVALID_INPUT, HTTPStatus.BAD_REQUEST),
        (ErrorKind.NOT_FOUND, HTTPStatus.NOT_FOUND),
        (ErrorKind.CONFLICT, HTTPStatus.BAD_REQUEST),
        (ErrorKind.UNAUTHORIZED, HTTPStatus.UNAUTHORIZED),
        (ErrorKind.INTERNAL_FAULT, HTTPStatus.INTERNAL_SERVER_ERROR),
    ],
)
def test_status_for_kind(kind: ErrorKind, status: HTTPStatus) -> None:
    assert status_for(kind) == status


def test_every_kind_is_mapped() -> None:
    for kind in ErrorKind:
        assert isinstance(status_for(kind), HTTPStatus)


@pytest.mark.parametrize(
    ("error", "kind", "message"),
    [
        (EmailAlreadyRegisteredError(), ErrorKind.CONFLICT, "email already registered"),
        (PasswordMismatchError(), ErrorKind.INVALID_INPUT, "password not match"),
        (InvalidCredentialsError(), ErrorKind.NOT_FOUND, "wrong email or password"),
        (InvalidTokenError(), ErrorKind.UNAUTHORIZED, "invalid or expired token"),
    ],
)
def test_domain_errors_carry_kind_and_message(
    error: AppError, kind: ErrorKind, message: str
) -> None:
    assert error.kind is kind
    assert error.to_dict() == {"status": int(status_for(kind)), "message": message}


@pytest.mark.parametrize("error", [PasswordHashingError(), UserStoreError("add")])
def test_internal_faults_render_generic_message(error: AppError) -> None:
    assert error.kind is ErrorKind.INTERNAL_FAULT
    assert error.to_dict() == {"status": 500, "message": INTERNAL_FAULT_MESSAGE}
    assert error.message != INTERNAL_FAULT_MESSAGE
