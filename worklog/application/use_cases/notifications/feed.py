"""Notification feed derived from activities about or by a user."""

from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from worklog.application.use_cases.activities.views import build_activity_views
from worklog.config import get_settings
from worklog.domain.entities import (
    ActivityFilter,
    NotificationPage,
    NotificationView,
    total_pages,
)
from worklog.domain.exceptions import ValidationError
from worklog.infrastructure.read_state import NoOpReadStateStore, ReadStateStore
from worklog.infrastructure.repositories import ActivityRepository
from worklog.utils import ensure_app_timezone, now_in_app_timezone

from .projector import project_activity

DEFAULT_NOTIFICATION_LIMIT = 20
MAX_NOTIFICATION_LIMIT = 100

_default_read_state = NoOpReadStateStore()


def get_read_window() -> timedelta:
    return timedelta(days=get_settings().notification_read_window_days)


def _unread_filter(user_id: int, now: datetime) -> ActivityFilter:
    return ActivityFilter(related_user_id=user_id, created_start=now - get_read_window())


def get_unread_count(session: Session, user_id: int, *, now: datetime | None = None) -> int:
    """Count activities involving ``user_id`` inside the read window."""

    now = ensure_app_timezone(now) or now_in_app_timezone()
    return ActivityRepository(session).count(_unread_filter(user_id, now))


def get_notifications(
    session: Session,
    user_id: int,
    *,
    page: int = 1,
    limit: int = DEFAULT_NOTIFICATION_LIMIT,
    unread_only: bool = False,
    now: datetime | None = None,
) -> NotificationPage[NotificationView]:
    """Return one page of notifications for ``user_id``.

    ``unread_count`` always covers the whole read window, independent of
    ``unread_only`` and of the requested page.
    """

    if page < 1:
        raise ValidationError("Page must be greater than or equal to 1")
    if not 1 <= limit <= MAX_NOTIFICATION_LIMIT:
        raise ValidationError(f"Limit must be between 1 and {MAX_NOTIFICATION_LIMIT}")

    now = ensure_app_timezone(now) or now_in_app_timezone()
    read_window = get_read_window()
    activity_filter = (
        _unread_filter(user_id, now)
        if unread_only
        else ActivityFilter(related_user_id=user_id)
    )

    records, total, current_page = ActivityRepository(session).find_page(
        activity_filter, page=page, limit=limit
    )
    notifications = [
        project_activity(view, user_id, now=now, read_window=read_window)
        for view in build_activity_views(session, records)
    ]
    return NotificationPage(
        items=notifications,
        total=total,
        page=current_page,
        limit=limit,
        pages=total_pages(total, limit),
        unread_count=get_unread_count(session, user_id, now=now),
    )


def mark_as_read(
    user_id: int, notification_id: int, *, read_state: ReadStateStore | None = None
) -> bool:
    return (read_state or _default_read_state).mark_read(user_id, notification_id)


def mark_all_as_read(
    session: Session,
    user_id: int,
    *,
    read_state: ReadStateStore | None = None,
    now: datetime | None = None,
) -> tuple[bool, int]:
    """Mark everything read and report how many notifications were unread."""

    count = get_unread_count(session, user_id, now=now)
    return (read_state or _default_read_state).mark_all_read(user_id), count


def delete_notification(
    user_id: int, notification_id: int, *, read_state: ReadStateStore | None = None
) -> bool:
    return (read_state or _default_read_state).dismiss(user_id, notification_id)


__all__ = [
    "DEFAULT_NOTIFICATION_LIMIT",
    "MAX_NOTIFICATION_LIMIT",
    "delete_notification",
    "get_notifications",
    "get_read_window",
    "get_unread_count",
    "mark_all_as_read",
    "mark_as_read",
]
