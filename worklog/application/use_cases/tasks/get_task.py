"""Use case for retrieving a single task."""

from sqlalchemy.orm import Session

from worklog.domain.entities import Task
from worklog.domain.exceptions import NotFound, PermissionDenied
from worklog.infrastructure.repositories import TaskRepository


def get_task(session: Session, task_id: int) -> Task:
    """Return the requested task or raise an error if it does not exist."""

    task = TaskRepository(session).get(task_id)
    if task is None:
        raise NotFound("Task not found")
    return task


def get_owned_task(session: Session, task_id: int, actor_id: int) -> Task:
    """Return the task when ``actor_id`` owns it."""

    task = get_task(session, task_id)
    if task.owner_id != actor_id:
        raise PermissionDenied("Only the task owner can modify this task")
    return task
