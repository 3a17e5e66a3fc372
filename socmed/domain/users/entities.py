# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class UserAccount:

    id: int
    name: str
    email: str
    password_hash: str = field(repr=False)
    gender: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(slots=True, frozen=True)
class RegistrationCommand:
    name: str
    email: str
    password: str = field(repr=False)
    password_confirm: str = field(repr=False)
    gender: str


@dataclass(slots=True, frozen=True)
class LoginCommand:
    email: str
    password: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class LoginResult:
    id: int
    name: str
    token: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Decoded contents of a verified session token."""

    subject_id: int
    issued_at: datetime
    not_before: datetime
    expires_at: datetime
