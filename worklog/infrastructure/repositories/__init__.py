"""Repository implementations for infrastructure layer."""

from .activity_repository import SORT_ORDERS, SORTABLE_FIELDS, ActivityRepository
from .comment_repository import CommentRepository
from .note_repository import NoteRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityRepository",
    "CommentRepository",
    "NoteRepository",
    "SORTABLE_FIELDS",
    "SORT_ORDERS",
    "TaskRepository",
    "UserRepository",
]
