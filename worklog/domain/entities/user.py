"""Domain entity representing a user."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

USER_ROLE_USER = "user"
USER_ROLE_MANAGER = "manager"
USER_ROLE_ADMIN = "admin"
USER_ROLES = (USER_ROLE_USER, USER_ROLE_MANAGER, USER_ROLE_ADMIN)


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    name: str
    email: str
    password: str
    role: str = USER_ROLE_USER
    avatar: str | None = None
    preferences: dict[str, Any] = field(default_factory=dict)
    last_login: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_active: bool = True
    deleted: bool = False
    deleted_at: datetime | None = None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role.lower() == role.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(USER_ROLE_ADMIN)


__all__ = ["User", "USER_ROLES", "USER_ROLE_ADMIN", "USER_ROLE_MANAGER", "USER_ROLE_USER"]
