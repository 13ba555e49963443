"""Domain entity representing a comment on a task."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Comment:
    id: int | None
    task_id: int
    author_id: int
    content: str
    parent_id: int | None = None
    created_at: datetime | None = None


__all__ = ["Comment"]
