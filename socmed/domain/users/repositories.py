# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenClaims, UserAccount


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> UserAccount | None: ...
    def find_by_id(self, user_id: int) -> UserAccount | None: ...
    def add(self, user: UserAccount) -> UserAccount: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, subject_id: int) -> str: ...
    def verify(self, token: str) -> TokenClaims: ...
