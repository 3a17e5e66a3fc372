# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from socmed.shared.logging import logger

_WEAK_TOKEN_SECRETS = ("dev", "development", "test", "mysecretkey", "")

_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    validate_by_name=True,
    extra="ignore",
)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///socmed.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SECTION_CONFIG


class AuthConfig(BaseSettings):
    # Signing secret for session tokens, read once at startup
    token_secret: str = Field("dev", alias="TOKEN_SECRET")
    token_ttl_seconds: int = Field(3600, ge=1, alias="TOKEN_TTL_SECONDS")
    token_algorithm: str = Field("HS256", alias="TOKEN_ALGORITHM")

    model_config = _SECTION_CONFIG


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SECTION_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    port: int = Field(8080, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _check_production_secret(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.auth.token_secret in _WEAK_TOKEN_SECRETS:
            raise ValueError("TOKEN_SECRET must be set to a random value when APP_ENV is production")

        if "*" in self.security.allowed_origins:
            logger.warning("config: ALLOWED_ORIGINS includes \"*\" in production")
        if not self.security.enable_hsts:
            logger.warning("config: ENABLE_HSTS is off in production")

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = ["AppConfig", "AuthConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
