from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CredentialsDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=1024)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if value != value.strip():
            raise ValueError("Username must not start or end with whitespace")
        return value


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class AuthSuccessDTO(BaseModel):
    ok: bool = True


class LoginSuccessDTO(BaseModel):
    token: str
