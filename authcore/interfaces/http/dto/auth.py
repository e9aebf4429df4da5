from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequestDTO(BaseModel):
    # Presence is checked by the authentication flow, not here.
    first_name: str | None = Field(None, alias="firstName")
    email: str | None = None
    password: str | None = None

    model_config = ConfigDict(validate_by_name=True)


class LoginRequestDTO(BaseModel):
    email: str | None = None
    password: str | None = None


class AuthSuccessDTO(BaseModel):
    token: str
    first_name: str = Field(serialization_alias="firstName")


class AuthErrorDTO(BaseModel):
    message: str
    error: str | None = None
