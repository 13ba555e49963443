"""Notification feed projected from the activity ledger."""

from .feed import (
    DEFAULT_NOTIFICATION_LIMIT,
    MAX_NOTIFICATION_LIMIT,
    delete_notification,
    get_notifications,
    get_read_window,
    get_unread_count,
    mark_all_as_read,
    mark_as_read,
)
from .projector import is_read, project_activity

__all__ = [
    "DEFAULT_NOTIFICATION_LIMIT",
    "MAX_NOTIFICATION_LIMIT",
    "delete_notification",
    "get_notifications",
    "get_read_window",
    "get_unread_count",
    "is_read",
    "mark_all_as_read",
    "mark_as_read",
    "project_activity",
]
