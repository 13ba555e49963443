"""Pydantic schemas for the activity ledger endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .common import CamelModel, PageRead


class UserSummaryRead(CamelModel):
    id: int
    name: str
    email: str
    avatar: str | None = None


class EntitySummaryRead(CamelModel):
    id: int
    title: str


class ActivityCreate(CamelModel):
    """Client-originated activity; the actor is always the caller."""

    type: str = Field(..., min_length=1, description="Activity type identifier")
    description: str = Field(..., min_length=1, max_length=1000)
    task_id: int | None = None
    note_id: int | None = None
    target_user_id: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class ActivityRead(CamelModel):
    id: int
    type: str
    description: str
    actor_id: int
    actor: UserSummaryRead | None = None
    target_user_id: int | None = None
    target_user: UserSummaryRead | None = None
    task_id: int | None = None
    task: EntitySummaryRead | None = None
    note_id: int | None = None
    note: EntitySummaryRead | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


ActivityPageRead = PageRead[ActivityRead]


__all__ = [
    "ActivityCreate",
    "ActivityPageRead",
    "ActivityRead",
    "EntitySummaryRead",
    "UserSummaryRead",
]
