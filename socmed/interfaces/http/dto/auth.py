from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from socmed.domain.users.entities import (LoginCommand, LoginResult,
                                          RegistrationCommand)


class _RequestDTO(BaseModel):
    # JSON strings only; no coercion from numbers or booleans
    model_config = ConfigDict(strict=True, extra="ignore")

    @field_validator("*")
    @classmethod
    def _require_utf8(cls, value: str) -> str:
        # Lone surrogates parse as JSON but cannot be hashed or stored
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise PydanticCustomError(
                "string_not_utf8",
                "Value must be valid UTF-8 text",
                {},
            ) from None
        return value


class RegisterRequestDTO(_RequestDTO):
    name: str
    email: str
    password: str = Field(repr=False)
    password_confirm: str = Field(repr=False)
    gender: str

    def to_command(self) -> RegistrationCommand:
        return RegistrationCommand(
            name=self.name,
            email=self.email,
            password=self.password,
            password_confirm=self.password_confirm,
            gender=self.gender,
        )


class LoginRequestDTO(_RequestDTO):
    email: str
    password: str = Field(repr=False)

    def to_command(self) -> LoginCommand:
        return LoginCommand(email=self.email, password=self.password)


class RegisterSuccessDTO(BaseModel):
    status: int = 201
    message: str = "Register successfully, please login"


class LoginSuccessDTO(BaseModel):
    status: int = 200
    id: int
    name: str
    token: str

    @classmethod
    def from_result(cls, result: LoginResult) -> "LoginSuccessDTO":
        return cls(id=result.id, name=result.name, token=result.token)
