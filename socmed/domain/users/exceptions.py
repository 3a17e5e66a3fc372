# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from socmed.shared.errors.base import DomainError, ErrorKind, InfrastructureError

WRONG_CREDENTIALS_MESSAGE = "wrong email or password"


class EmailAlreadyRegisteredError(DomainError):
    def __init__(self) -> None:
        super().__init__("email already registered", kind=ErrorKind.CONFLICT)


class PasswordMismatchError(DomainError):
    def __init__(self) -> None:
        super().__init__("password not match", kind=ErrorKind.INVALID_INPUT)


class InvalidCredentialsError(DomainError):
    """Raised for both an unknown email and a wrong password."""

    def __init__(self) -> None:
        super().__init__(WRONG_CREDENTIALS_MESSAGE, kind=ErrorKind.NOT_FOUND)


class InvalidTokenError(DomainError):
    def __init__(self) -> None:
        super().__init__("invalid or expired token", kind=ErrorKind.UNAUTHORIZED)


class PasswordHashingError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("password hashing failed")


class TokenSigningError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("token signing failed")


class UserStoreError(InfrastructureError):
    def __init__(self, operation: str) -> None:
        super().__init__("user store failure", context={"operation": operation})
