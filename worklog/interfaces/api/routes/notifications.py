"""Endpoints serving the notification feed derived from the activity ledger."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from worklog.application.use_cases.notifications import (
    DEFAULT_NOTIFICATION_LIMIT,
    delete_notification,
    get_notifications,
    get_unread_count,
    mark_all_as_read,
    mark_as_read,
)
from worklog.domain.entities import NotificationView, User
from worklog.infrastructure.database import get_db
from worklog.interfaces.api.dependencies import get_current_active_user
from worklog.interfaces.api.schemas import (
    ApiResponse,
    CountRead,
    NotificationPageRead,
    NotificationRead,
    success,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: NotificationView) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        type=notification.activity_type,
        title=notification.title,
        message=notification.message,
        category=notification.category,
        priority=notification.priority,
        timestamp=notification.timestamp,
        is_read=notification.is_read,
        related_id=notification.related_id,
        related_kind=notification.related_kind,
    )


@router.get("", response_model=ApiResponse[NotificationPageRead])
def list_notifications(
    page: int = Query(1),
    limit: int = Query(DEFAULT_NOTIFICATION_LIMIT),
    unread_only: bool = Query(False, alias="unreadOnly"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the notifications derived for the authenticated user."""

    result = get_notifications(
        db, current_user.id, page=page, limit=limit, unread_only=unread_only
    )
    return success(
        NotificationPageRead(
            items=[_notification_to_schema(item) for item in result.items],
            total=result.total,
            page=result.page,
            limit=result.limit,
            pages=result.pages,
            unread_count=result.unread_count,
        )
    )


@router.get("/unread-count", response_model=ApiResponse[CountRead])
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return success(CountRead(count=get_unread_count(db, current_user.id)))


@router.patch("/mark-all-read", response_model=ApiResponse[CountRead])
def mark_all_notifications_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Acknowledge every notification. Read state is derived, so nothing changes."""

    _, count = mark_all_as_read(db, current_user.id)
    return success(CountRead(count=count), "All notifications marked as read")


@router.patch("/{notification_id}/read", response_model=ApiResponse[None])
def mark_notification_as_read(
    notification_id: int,
    current_user: User = Depends(get_current_active_user),
):
    mark_as_read(current_user.id, notification_id)
    return success(message="Notification marked as read")


@router.delete("/{notification_id}", response_model=ApiResponse[None])
def remove_notification(
    notification_id: int,
    current_user: User = Depends(get_current_active_user),
):
    delete_notification(current_user.id, notification_id)
    return success(message="Notification deleted")


__all__ = ["router"]
