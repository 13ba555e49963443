"""Domain entity representing a notification projected from the ledger."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

PRIORITY_LOW = "low"
PRIORITY_MEDIUM = "medium"
PRIORITY_HIGH = "high"


@dataclass(frozen=True)
class NotificationView:
    """Display-ready notification derived from one activity record.

    Nothing here is persisted; ``is_read`` is computed from the record age.
    """

    id: int
    activity_type: str
    title: str
    message: str
    category: str
    priority: str
    timestamp: datetime
    is_read: bool
    related_id: int | None = None
    related_kind: str | None = None


__all__ = ["NotificationView", "PRIORITY_HIGH", "PRIORITY_LOW", "PRIORITY_MEDIUM"]
