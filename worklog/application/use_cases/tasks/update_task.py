"""Use case for updating tasks.

A single update can produce several ledger entries (a generic update plus
status, completion, due date and archive events). They are appended as one
batch so they share a timestamp and either all land or none do.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import record_activities
from worklog.domain.entities import (
    TASK_STATUS_DONE,
    TASK_STATUSES,
    ActivityRecordInput,
    ActivityType,
    Task,
)
from worklog.domain.exceptions import ValidationError
from worklog.infrastructure.repositories import TaskRepository
from worklog.utils import ensure_app_timezone

from .get_task import get_owned_task

UPDATABLE_FIELDS = ("title", "description", "status", "due_date", "is_archived")


def _isoformat(value: datetime | None) -> str | None:
    value = ensure_app_timezone(value)
    return value.isoformat() if value else None


def _status_activities(
    task: Task, old_status: str, actor_id: int
) -> list[ActivityRecordInput]:
    new_status = task.status
    activities = [
        ActivityRecordInput(
            type=ActivityType.TASK_STATUS_CHANGED,
            actor_id=actor_id,
            task_id=task.id,
            description=f"Task status changed from {old_status} to {new_status}",
            metadata={"oldStatus": old_status, "newStatus": new_status},
        )
    ]
    if new_status == TASK_STATUS_DONE:
        activities.append(
            ActivityRecordInput(
                type=ActivityType.TASK_COMPLETED,
                actor_id=actor_id,
                task_id=task.id,
                description=f"Task completed: {task.title}",
            )
        )
    elif old_status == TASK_STATUS_DONE:
        activities.append(
            ActivityRecordInput(
                type=ActivityType.TASK_REOPENED,
                actor_id=actor_id,
                task_id=task.id,
                description=f"Task reopened: {task.title}",
                metadata={"reason": "status", "oldStatus": old_status},
            )
        )
    return activities


def update_task(
    session: Session, task_id: int, *, actor_id: int, changes: dict[str, Any]
) -> Task:
    """Apply ``changes`` to the task and log what actually changed."""

    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unsupported task fields: {', '.join(sorted(unknown))}")
    if "status" in changes and changes["status"] not in TASK_STATUSES:
        raise ValidationError(f"Invalid task status '{changes['status']}'")
    if "title" in changes and not (changes["title"] or "").strip():
        raise ValidationError("Task title is required")

    if "due_date" in changes:
        changes = {**changes, "due_date": ensure_app_timezone(changes["due_date"])}

    task = get_owned_task(session, task_id, actor_id)
    old_status = task.status
    old_due_date = task.due_date
    old_archived = task.is_archived

    changed = sorted(
        name for name, value in changes.items() if getattr(task, name) != value
    )
    if not changed:
        return task

    for name in changed:
        setattr(task, name, changes[name])
    updated = TaskRepository(session).update(task)

    activities = [
        ActivityRecordInput(
            type=ActivityType.TASK_UPDATED,
            actor_id=actor_id,
            task_id=updated.id,
            description=f"Task updated: {updated.title}",
            metadata={"changes": changed},
        )
    ]
    if "status" in changed:
        activities.extend(_status_activities(updated, old_status, actor_id))
    if "due_date" in changed:
        activities.append(
            ActivityRecordInput(
                type=ActivityType.DUE_DATE_CHANGED,
                actor_id=actor_id,
                task_id=updated.id,
                description=f"Due date changed for task: {updated.title}",
                metadata={
                    "oldDueDate": _isoformat(old_due_date),
                    "newDueDate": _isoformat(updated.due_date),
                },
            )
        )
    if "is_archived" in changed:
        activity_type = (
            ActivityType.TASK_ARCHIVED if updated.is_archived else ActivityType.TASK_REOPENED
        )
        verb = "archived" if updated.is_archived else "restored"
        activities.append(
            ActivityRecordInput(
                type=activity_type,
                actor_id=actor_id,
                task_id=updated.id,
                description=f"Task {verb}: {updated.title}",
                metadata={"reason": "archive", "wasArchived": old_archived},
            )
        )
    record_activities(session, activities)
    return updated
