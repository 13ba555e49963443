"""Use case for commenting on tasks."""

from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import record_activity
from worklog.domain.entities import ActivityRecordInput, ActivityType, Comment
from worklog.domain.exceptions import NotFound, ValidationError
from worklog.infrastructure.repositories import CommentRepository

from .get_task import get_task


def add_comment(
    session: Session,
    task_id: int,
    *,
    author_id: int,
    content: str,
    parent_id: int | None = None,
) -> Comment:
    """Attach a comment, or a reply to ``parent_id``, to the task."""

    if not content or not content.strip():
        raise ValidationError("Comment content is required")

    task = get_task(session, task_id)
    repository = CommentRepository(session)
    if parent_id is not None:
        parent = repository.get(parent_id)
        if parent is None or parent.task_id != task_id:
            raise NotFound("Parent comment not found")

    comment = repository.create(
        Comment(
            id=None,
            task_id=task_id,
            author_id=author_id,
            content=content.strip(),
            parent_id=parent_id,
        )
    )
    record_activity(
        session,
        ActivityRecordInput(
            type=ActivityType.COMMENT_ADDED,
            actor_id=author_id,
            task_id=task_id,
            description=f"Comment added to task: {task.title}",
            metadata={"commentId": comment.id, "isReply": parent_id is not None},
        ),
    )
    return comment


def list_task_comments(session: Session, task_id: int) -> list[Comment]:
    get_task(session, task_id)
    return list(CommentRepository(session).list_for_task(task_id))
