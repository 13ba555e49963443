"""Aggregate application use cases."""

from .activities import best_effort_append, record_activities, record_activity
from .users import authenticate_user, record_login, register_user

__all__ = [
    "authenticate_user",
    "best_effort_append",
    "record_activities",
    "record_activity",
    "record_login",
    "register_user",
]
