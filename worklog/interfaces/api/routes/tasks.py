"""Endpoints for tasks and task comments."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from worklog.application.use_cases.tasks import (
    add_comment,
    assign_task,
    create_task,
    delete_task,
    get_task,
    list_task_comments,
    update_task,
)
from worklog.domain.entities import Task, User
from worklog.infrastructure.database import get_db
from worklog.interfaces.api.dependencies import get_current_active_user
from worklog.interfaces.api.schemas import (
    ApiResponse,
    CommentCreate,
    CommentRead,
    TaskAssign,
    TaskCreate,
    TaskRead,
    TaskUpdate,
    success,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _to_read_model(task: Task) -> TaskRead:
    return TaskRead.model_validate(task)


@router.post("", response_model=ApiResponse[TaskRead], status_code=status.HTTP_201_CREATED)
def create_task_endpoint(
    payload: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    task = create_task(
        db,
        owner_id=current_user.id,
        title=payload.title,
        description=payload.description,
        status=payload.status,
        due_date=payload.due_date,
    )
    return success(_to_read_model(task), "Task created")


@router.get("/{task_id}", response_model=ApiResponse[TaskRead])
def read_task(
    task_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return success(_to_read_model(get_task(db, task_id)))


@router.patch("/{task_id}", response_model=ApiResponse[TaskRead])
def update_task_endpoint(
    task_id: int,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    task = update_task(
        db,
        task_id,
        actor_id=current_user.id,
        changes=payload.model_dump(exclude_unset=True),
    )
    return success(_to_read_model(task), "Task updated")


@router.put("/{task_id}/assignee", response_model=ApiResponse[TaskRead])
def assign_task_endpoint(
    task_id: int,
    payload: TaskAssign,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Assign the task, or clear the assignee with ``assigneeId: null``."""

    task = assign_task(db, task_id, actor_id=current_user.id, assignee_id=payload.assignee_id)
    return success(_to_read_model(task), "Task assignment updated")


@router.delete("/{task_id}", response_model=ApiResponse[None])
def delete_task_endpoint(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    delete_task(db, task_id, actor_id=current_user.id)
    return success(message="Task deleted")


@router.post(
    "/{task_id}/comments",
    response_model=ApiResponse[CommentRead],
    status_code=status.HTTP_201_CREATED,
)
def add_comment_endpoint(
    task_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    comment = add_comment(
        db,
        task_id,
        author_id=current_user.id,
        content=payload.content,
        parent_id=payload.parent_id,
    )
    return success(CommentRead.model_validate(comment), "Comment added")


@router.get("/{task_id}/comments", response_model=ApiResponse[list[CommentRead]])
def list_comments(
    task_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    comments = list_task_comments(db, task_id)
    return success([CommentRead.model_validate(comment) for comment in comments])


__all__ = ["router"]
