"""Domain entity representing a task."""

from dataclasses import dataclass
from datetime import datetime

TASK_STATUS_TODO = "todo"
TASK_STATUS_IN_PROGRESS = "inProgress"
TASK_STATUS_IN_REVIEW = "inReview"
TASK_STATUS_DONE = "done"
TASK_STATUSES = (
    TASK_STATUS_TODO,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_IN_REVIEW,
    TASK_STATUS_DONE,
)


@dataclass
class Task:
    """A unit of work owned by a user and optionally assigned to another."""

    id: int | None
    title: str
    owner_id: int
    description: str | None = None
    status: str = TASK_STATUS_TODO
    due_date: datetime | None = None
    is_archived: bool = False
    assignee_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Task",
    "TASK_STATUSES",
    "TASK_STATUS_DONE",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_IN_REVIEW",
    "TASK_STATUS_TODO",
]
