"""Use cases for managing tasks and their comments."""

from .add_comment import add_comment, list_task_comments
from .assign_task import assign_task
from .create_task import create_task
from .delete_task import delete_task
from .get_task import get_owned_task, get_task
from .update_task import UPDATABLE_FIELDS, update_task

__all__ = [
    "UPDATABLE_FIELDS",
    "add_comment",
    "assign_task",
    "create_task",
    "delete_task",
    "get_owned_task",
    "get_task",
    "list_task_comments",
    "update_task",
]
