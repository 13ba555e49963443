"""Use case for deleting tasks."""

import logging

from sqlalchemy.orm import Session

from worklog.infrastructure.repositories import TaskRepository

from .get_task import get_owned_task

logger = logging.getLogger(__name__)


def delete_task(session: Session, task_id: int, *, actor_id: int) -> None:
    """Remove the task and its comments; ledger rows naming it are kept."""

    get_owned_task(session, task_id, actor_id)
    TaskRepository(session).delete(task_id)
    logger.info("Task %s deleted by user %s", task_id, actor_id)
