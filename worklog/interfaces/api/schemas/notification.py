"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import CamelModel, PageRead


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: int = Field(..., description="Identifier of the activity behind the notification")
    type: str
    title: str
    message: str
    category: str
    priority: str
    timestamp: datetime
    is_read: bool
    related_id: int | None = None
    related_kind: str | None = None


class NotificationPageRead(PageRead[NotificationRead]):
    unread_count: int = 0


__all__ = ["NotificationPageRead", "NotificationRead"]
