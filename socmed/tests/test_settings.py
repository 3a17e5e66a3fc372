from __future__ import annotations

import pytest
from pydantic import ValidationError

from socmed.shared.config.settings import AppConfig, AuthConfig, SecurityConfig


@pytest.mark.parametrize("secret", ["dev", "test", ""])
def test_production_rejects_weak_token_secret(secret: str) -> None:
    with pytest.raises(ValidationError, match="TOKEN_SECRET"):
        AppConfig(APP_ENV="production", auth=AuthConfig(TOKEN_SECRET=secret))


def test_production_accepts_random_token_secret() -> None:
    config = AppConfig(
        APP_ENV="production",
        auth=AuthConfig(TOKEN_SECRET="9f2c1e7a4b6d8e0f1a3c5e7b9d1f3a5c"),
        security=SecurityConfig(ALLOWED_ORIGINS="https://socmed.example", ENABLE_HSTS="true"),
    )

    assert config.is_production()
    assert config.security.allowed_origins == ["https://socmed.example"]
    assert config.security.enable_hsts is True


def test_weak_secret_is_tolerated_outside_production() -> None:
    config = AppConfig(APP_ENV="development", auth=AuthConfig(TOKEN_SECRET="dev"))

    assert not config.is_production()
    assert config.auth.token_secret == "dev"
