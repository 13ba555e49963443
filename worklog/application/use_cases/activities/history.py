"""Bounded recent-history views for a single task or note."""

from __future__ import annotations

from sqlalchemy.orm import Session

from worklog.domain.entities import ActivityFilter, ActivityView
from worklog.domain.exceptions import NotFound, ValidationError
from worklog.infrastructure.repositories import (
    ActivityRepository,
    NoteRepository,
    TaskRepository,
)

from .views import build_activity_views

HISTORY_LIMIT = 50


def get_task_history(
    session: Session, task_id: int, *, limit: int = HISTORY_LIMIT
) -> list[ActivityView]:
    """Return up to ``limit`` activities of an existing task, newest first."""

    if not TaskRepository(session).exists(task_id):
        raise NotFound("Task not found")
    return _history(session, ActivityFilter(task_id=task_id), limit)


def get_note_history(
    session: Session, note_id: int, *, limit: int = HISTORY_LIMIT
) -> list[ActivityView]:
    """Return up to ``limit`` activities of an existing note, newest first."""

    if not NoteRepository(session).exists(note_id):
        raise NotFound("Note not found")
    return _history(session, ActivityFilter(note_id=note_id), limit)


def _history(session: Session, activity_filter: ActivityFilter, limit: int) -> list[ActivityView]:
    if limit < 1:
        raise ValidationError("Limit must be greater than or equal to 1")
    records = ActivityRepository(session).find_many(
        activity_filter, sort_by="createdAt", sort_order="desc", limit=limit
    )
    return build_activity_views(session, records)


__all__ = ["HISTORY_LIMIT", "get_note_history", "get_task_history"]
