"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .get_user import get_user
from .record_login import record_login
from .register_user import account_created_activity, register_user
from .update_profile import (
    change_avatar,
    change_password,
    update_preferences,
    update_profile,
)

__all__ = [
    "AuthenticationStatus",
    "account_created_activity",
    "authenticate_user",
    "change_avatar",
    "change_password",
    "get_user",
    "record_login",
    "register_user",
    "update_preferences",
    "update_profile",
]
