"""Use case for changing the assignee of a task."""

from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import record_activities
from worklog.domain.entities import ActivityRecordInput, ActivityType, Task
from worklog.domain.exceptions import NotFound
from worklog.infrastructure.repositories import TaskRepository, UserRepository

from .get_task import get_owned_task


def assign_task(
    session: Session, task_id: int, *, actor_id: int, assignee_id: int | None
) -> Task:
    """Assign the task to ``assignee_id`` or clear the assignee with ``None``.

    The previous assignee, if any, receives a ``task_unassigned`` entry and
    the new one a ``task_assigned`` entry, both in the same batch.
    """

    task = get_owned_task(session, task_id, actor_id)
    if assignee_id is not None and not UserRepository(session).exists(assignee_id):
        raise NotFound("User not found")
    if task.assignee_id == assignee_id:
        return task

    previous_assignee = task.assignee_id
    task.assignee_id = assignee_id
    updated = TaskRepository(session).update(task)

    activities = []
    if previous_assignee is not None:
        activities.append(
            ActivityRecordInput(
                type=ActivityType.TASK_UNASSIGNED,
                actor_id=actor_id,
                task_id=updated.id,
                target_user_id=previous_assignee,
                description=f"User unassigned from task: {updated.title}",
            )
        )
    if assignee_id is not None:
        activities.append(
            ActivityRecordInput(
                type=ActivityType.TASK_ASSIGNED,
                actor_id=actor_id,
                task_id=updated.id,
                target_user_id=assignee_id,
                description=f"Task assigned: {updated.title}",
                metadata={"previousAssignee": previous_assignee},
            )
        )
    record_activities(session, activities)
    return updated
