# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from http import HTTPStatus
from types import MappingProxyType
from typing import Any

INTERNAL_FAULT_MESSAGE = "internal server error"


class ErrorKind(StrEnum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    INTERNAL_FAULT = "internal_fault"


# Conflict is a sub-case of invalid input on the wire.
STATUS_BY_KIND: Mapping[ErrorKind, HTTPStatus] = MappingProxyType(
    {
        ErrorKind.INVALID_INPUT: HTTPStatus.BAD_REQUEST,
        ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
        ErrorKind.CONFLICT: HTTPStatus.BAD_REQUEST,
        ErrorKind.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
        ErrorKind.INTERNAL_FAULT: HTTPStatus.INTERNAL_SERVER_ERROR,
    }
)


def status_for(kind: ErrorKind) -> HTTPStatus:
    return STATUS_BY_KIND[kind]


@dataclass(slots=True)
class AppError(Exception):
    kind: ErrorKind
    message: str
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    @property
    def status(self) -> HTTPStatus:
        return status_for(self.kind)

    @property
    def public_message(self) -> str:
        """Message safe to show to the caller verbatim."""
        if self.kind is ErrorKind.INTERNAL_FAULT:
            return INTERNAL_FAULT_MESSAGE
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {"status": int(self.status), "message": self.public_message}


class DomainError(AppError):
    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.INVALID_INPUT,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(kind=kind, message=message, context=context)


class InfrastructureError(AppError):
    def __init__(
        self,
        message: str = "infrastructure_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(kind=ErrorKind.INTERNAL_FAULT, message=message, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "invalid request body",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(kind=ErrorKind.INVALID_INPUT, message=message, context=context)


__all__ = [
    "AppError",
    "DomainError",
    "ErrorKind",
    "INTERNAL_FAULT_MESSAGE",
    "InfrastructureError",
    "STATUS_BY_KIND",
    "ValidationError",
    "status_for",
]
