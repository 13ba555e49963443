"""Use case for creating tasks."""

from datetime import datetime

from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import record_activity
from worklog.domain.entities import (
    TASK_STATUS_TODO,
    TASK_STATUSES,
    ActivityRecordInput,
    ActivityType,
    Task,
)
from worklog.domain.exceptions import ValidationError
from worklog.infrastructure.repositories import TaskRepository


def create_task(
    session: Session,
    *,
    owner_id: int,
    title: str,
    description: str | None = None,
    status: str = TASK_STATUS_TODO,
    due_date: datetime | None = None,
) -> Task:
    """Persist a new task and log its creation."""

    if not title or not title.strip():
        raise ValidationError("Task title is required")
    if status not in TASK_STATUSES:
        raise ValidationError(f"Invalid task status '{status}'")

    task = TaskRepository(session).create(
        Task(
            id=None,
            title=title.strip(),
            description=description,
            status=status,
            due_date=due_date,
            owner_id=owner_id,
        )
    )
    record_activity(
        session,
        ActivityRecordInput(
            type=ActivityType.TASK_CREATED,
            actor_id=owner_id,
            task_id=task.id,
            description=f"Task created: {task.title}",
            metadata={"status": task.status},
        ),
    )
    return task
