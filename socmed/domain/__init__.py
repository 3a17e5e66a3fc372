# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import (LoginCommand, LoginResult, RegistrationCommand,
                             TokenClaims, UserAccount)

__all__ = [
    "LoginCommand",
    "LoginResult",
    "RegistrationCommand",
    "TokenClaims",
    "UserAccount",
]
