from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from voidfeed.domain.users.entities import User


class RegisterRequestDTO(BaseModel):
    username: str | None = None
    password: str | None = None
    email: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None


class LoginRequestDTO(BaseModel):
    username: str | None = None
    password: str | None = None


class UserDTO(BaseModel):
    id: str
    username: str
    email: str | None = None

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(id=user.id, username=user.username, email=user.email)


class AuthSuccessDTO(BaseModel):
    token: str
    user: UserDTO

    model_config = ConfigDict(frozen=True)
