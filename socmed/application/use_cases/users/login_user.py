# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from functools import cached_property

from socmed.domain.users.entities import LoginCommand, LoginResult, UserAccount
from socmed.domain.users.exceptions import (InvalidCredentialsError,
                                            PasswordHashingError,
                                            TokenSigningError, UserStoreError)
from socmed.domain.users.repositories import (PasswordHasher, TokenIssuer,
                                              UserRepository)
from socmed.shared.errors.base import AppError
from socmed.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    @cached_property
    def _decoy_digest(self) -> str:
        return self._password_hasher.hash(secrets.token_urlsafe(32))

    def _credentials_match(self, user: UserAccount | None, password: str) -> bool:
        # Unknown emails still pay for one verify so both failures take as long
        if user is None:
            self._password_hasher.verify(password, self._decoy_digest)
            return False
        return self._password_hasher.verify(password, user.password_hash)

    def execute(self, command: LoginCommand) -> LoginResult:
        try:
            user = self._users.find_by_email(command.email)
        except AppError:
            raise
        except Exception as exc:
            raise UserStoreError("find_by_email") from exc

        try:
            password_valid = self._credentials_match(user, command.password)
        except AppError:
            raise
        except Exception as exc:
            raise PasswordHashingError() from exc

        # Unknown email and wrong password share one error so neither leaks
        if user is None or not password_valid:
            logger.info("auth.login: rejected, wrong email or password")
            raise InvalidCredentialsError()

        try:
            token = self._tokens.issue(user.id)
        except AppError:
            raise
        except Exception as exc:
            raise TokenSigningError() from exc

        logger.info(f"auth.login: ok user_id={user.id}")
        return LoginResult(id=user.id, name=user.name, token=token)
