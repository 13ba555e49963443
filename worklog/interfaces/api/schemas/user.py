"""User schemas."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, EmailStr, Field

from .common import CamelModel


class UserRead(CamelModel):
    id: int
    name: str
    email: EmailStr
    role: str
    avatar: str | None = None
    preferences: dict[str, Any] = Field(default_factory=dict)
    last_login: datetime | None = None
    created_at: datetime | None = None
    is_active: bool


class ProfileUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None

    model_config = ConfigDict(extra="forbid")


class AvatarUpdate(CamelModel):
    avatar: str = Field(..., min_length=1, max_length=500)


class PreferencesUpdate(CamelModel):
    preferences: dict[str, Any] = Field(..., min_length=1)


class PasswordChange(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)


__all__ = [
    "AvatarUpdate",
    "PasswordChange",
    "PreferencesUpdate",
    "ProfileUpdate",
    "UserRead",
]
