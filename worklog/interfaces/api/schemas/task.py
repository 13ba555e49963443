"""Schemas for tasks and their comments."""

from datetime import datetime

from pydantic import ConfigDict, Field

from worklog.domain.entities import TASK_STATUS_TODO

from .common import CamelModel


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    status: str = TASK_STATUS_TODO
    due_date: datetime | None = None


class TaskUpdate(CamelModel):
    """Partial update; only the fields present in the request are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    status: str | None = None
    due_date: datetime | None = None
    is_archived: bool = False

    model_config = ConfigDict(extra="forbid")


class TaskAssign(CamelModel):
    assignee_id: int | None = None


class TaskRead(CamelModel):
    id: int
    title: str
    description: str | None = None
    status: str
    due_date: datetime | None = None
    is_archived: bool
    owner_id: int
    assignee_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CommentCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=2000)
    parent_id: int | None = None


class CommentRead(CamelModel):
    id: int
    task_id: int
    author_id: int
    content: str
    parent_id: int | None = None
    created_at: datetime | None = None


__all__ = [
    "CommentCreate",
    "CommentRead",
    "TaskAssign",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
]
