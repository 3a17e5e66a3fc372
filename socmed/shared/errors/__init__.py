from .base import (AppError, DomainError, ErrorKind, InfrastructureError,
                   ValidationError, status_for)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "ErrorKind",
    "InfrastructureError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
    "status_for",
]
