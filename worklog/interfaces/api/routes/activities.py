"""Endpoints exposing the activity ledger."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    HISTORY_LIMIT,
    RECENT_ACTIVITY_LIMIT,
    get_activity,
    get_note_history,
    get_task_history,
    get_user_activities,
    get_user_related_activities,
    query_activities,
    record_activity,
)
from worklog.domain.entities import ActivityFilter, ActivityRecordInput, ActivityView, User
from worklog.infrastructure.database import get_db
from worklog.interfaces.api.dependencies import get_current_active_user, require_admin
from worklog.interfaces.api.schemas import (
    ActivityCreate,
    ActivityPageRead,
    ActivityRead,
    ApiResponse,
    EntitySummaryRead,
    UserSummaryRead,
    success,
)
from worklog.utils import ensure_app_timezone

router = APIRouter(prefix="/activities", tags=["activities"])


def _view_to_schema(view: ActivityView) -> ActivityRead:
    record = view.record
    return ActivityRead(
        id=record.id,
        type=record.type,
        description=record.description,
        actor_id=record.actor_id,
        actor=UserSummaryRead.model_validate(view.actor) if view.actor else None,
        target_user_id=record.target_user_id,
        target_user=(
            UserSummaryRead.model_validate(view.target_user) if view.target_user else None
        ),
        task_id=record.task_id,
        task=EntitySummaryRead.model_validate(view.task) if view.task else None,
        note_id=record.note_id,
        note=EntitySummaryRead.model_validate(view.note) if view.note else None,
        metadata=dict(record.metadata),
        created_at=record.created_at,
    )


def _views_to_schema(views: list[ActivityView]) -> list[ActivityRead]:
    return [_view_to_schema(view) for view in views]


@router.post(
    "",
    response_model=ApiResponse[ActivityRead],
    status_code=status.HTTP_201_CREATED,
)
def create_activity(
    payload: ActivityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Record an activity performed by the authenticated user."""

    record = record_activity(
        db,
        ActivityRecordInput(
            type=payload.type,
            actor_id=current_user.id,
            description=payload.description,
            task_id=payload.task_id,
            note_id=payload.note_id,
            target_user_id=payload.target_user_id,
            metadata=payload.metadata,
        ),
    )
    view = get_activity(db, record.id)
    return success(_view_to_schema(view), "Activity recorded")


@router.get("", response_model=ApiResponse[ActivityPageRead])
def list_activities(
    task: int | None = Query(None, description="Only activities about this task"),
    note: int | None = Query(None, description="Only activities about this note"),
    user: int | None = Query(None, description="Only activities performed by this user"),
    target_user: int | None = Query(None, alias="targetUser"),
    activity_types: list[str] | None = Query(None, alias="type"),
    created_start: datetime | None = Query(None, alias="createdStart"),
    created_end: datetime | None = Query(None, alias="createdEnd"),
    page: int = Query(DEFAULT_PAGE),
    limit: int = Query(DEFAULT_LIMIT),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Return one page of activities matching every supplied filter."""

    result = query_activities(
        db,
        ActivityFilter(
            task_id=task,
            note_id=note,
            actor_id=user,
            target_user_id=target_user,
            types=tuple(activity_types or ()),
            created_start=ensure_app_timezone(created_start),
            created_end=ensure_app_timezone(created_end),
        ),
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return success(
        ActivityPageRead(
            items=_views_to_schema(result.items),
            total=result.total,
            page=result.page,
            limit=result.limit,
            pages=result.pages,
        )
    )


@router.get("/user/recent", response_model=ApiResponse[list[ActivityRead]])
def read_my_recent_activities(
    limit: int = Query(RECENT_ACTIVITY_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Activities performed by the authenticated user, newest first."""

    return success(_views_to_schema(get_user_activities(db, current_user.id, limit=limit)))


@router.get("/user/related", response_model=ApiResponse[list[ActivityRead]])
def read_my_related_activities(
    limit: int = Query(RECENT_ACTIVITY_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Activities where the authenticated user is the actor or the target."""

    views = get_user_related_activities(db, current_user.id, limit=limit)
    return success(_views_to_schema(views))


@router.get("/user/{user_id}/recent", response_model=ApiResponse[list[ActivityRead]])
def read_user_recent_activities(
    user_id: int,
    limit: int = Query(RECENT_ACTIVITY_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    return success(_views_to_schema(get_user_activities(db, user_id, limit=limit)))


@router.get("/task/{task_id}/history", response_model=ApiResponse[list[ActivityRead]])
def read_task_history(
    task_id: int,
    limit: int = Query(HISTORY_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return success(_views_to_schema(get_task_history(db, task_id, limit=limit)))


@router.get("/note/{note_id}/history", response_model=ApiResponse[list[ActivityRead]])
def read_note_history(
    note_id: int,
    limit: int = Query(HISTORY_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return success(_views_to_schema(get_note_history(db, note_id, limit=limit)))


@router.get("/{activity_id}", response_model=ApiResponse[ActivityRead])
def read_activity(
    activity_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return success(_view_to_schema(get_activity(db, activity_id)))


__all__ = ["router"]
