"""ORM models used by the application infrastructure."""

from .activity import ActivityModel
from .comment import CommentModel
from .note import NoteModel
from .task import TaskModel
from .user import UserModel

__all__ = [
    "ActivityModel",
    "CommentModel",
    "NoteModel",
    "TaskModel",
    "UserModel",
]
