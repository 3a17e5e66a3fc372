# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from socmed.domain.users.entities import RegistrationCommand, UserAccount
from socmed.domain.users.exceptions import (EmailAlreadyRegisteredError,
                                            PasswordHashingError,
                                            PasswordMismatchError,
                                            UserStoreError)
from socmed.domain.users.repositories import PasswordHasher, UserRepository
from socmed.shared.errors.base import AppError
from socmed.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, command: RegistrationCommand) -> UserAccount:
        try:
            existing = self._users.find_by_email(command.email)
        except AppError:
            raise
        except Exception as exc:
            raise UserStoreError("find_by_email") from exc
        if existing:
            logger.info("auth.register: rejected, email already registered")
            raise EmailAlreadyRegisteredError()

        if command.password != command.password_confirm:
            raise PasswordMismatchError()

        try:
            hashed = self._password_hasher.hash(command.password)
        except AppError:
            raise
        except Exception as exc:
            raise PasswordHashingError() from exc

        user = UserAccount(
            id=0,
            name=command.name,
            email=command.email,
            password_hash=hashed,
            gender=command.gender,
        )
        try:
            persisted = self._users.add(user)
        except AppError:
            raise
        except Exception as exc:
            raise UserStoreError("add") from exc

        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted
