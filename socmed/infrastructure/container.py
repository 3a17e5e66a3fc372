# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from socmed.application.services.password_hashing import \
    WerkzeugPasswordHasher
from socmed.application.services.token_issuer import JwtTokenIssuer
from socmed.application.use_cases.users.login_user import LoginUserUseCase
from socmed.application.use_cases.users.register_user import \
    RegisterUserUseCase
from socmed.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from socmed.interfaces.http.controllers.auth_controller import AuthController
from socmed.interfaces.http.controllers.misc_controller import MiscController
from socmed.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        auth = self._config.auth
        return JwtTokenIssuer(
            secret=auth.token_secret,
            ttl=timedelta(seconds=auth.token_ttl_seconds),
            algorithm=auth.token_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
