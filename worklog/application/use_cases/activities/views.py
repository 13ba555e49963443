"""Join ledger records with display data for the entities they mention."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from worklog.domain.entities import (
    ActivityRecord,
    ActivityView,
    EntitySummary,
    User,
    UserSummary,
)
from worklog.infrastructure.repositories import (
    NoteRepository,
    TaskRepository,
    UserRepository,
)


def _user_summary(user: User | None) -> UserSummary | None:
    if user is None or user.id is None:
        return None
    return UserSummary(id=user.id, name=user.name, email=user.email, avatar=user.avatar)


def build_activity_views(
    session: Session, records: Sequence[ActivityRecord]
) -> list[ActivityView]:
    """Return one view per record, with ``None`` for vanished references."""

    users = UserRepository(session).get_map_by_ids(
        [record.actor_id for record in records]
        + [record.target_user_id for record in records]
    )
    task_titles = TaskRepository(session).get_titles(record.task_id for record in records)
    note_titles = NoteRepository(session).get_titles(record.note_id for record in records)

    views: list[ActivityView] = []
    for record in records:
        task = (
            EntitySummary(id=record.task_id, title=task_titles[record.task_id])
            if record.task_id in task_titles
            else None
        )
        note = (
            EntitySummary(id=record.note_id, title=note_titles[record.note_id])
            if record.note_id in note_titles
            else None
        )
        views.append(
            ActivityView(
                record=record,
                actor=_user_summary(users.get(record.actor_id)),
                target_user=_user_summary(users.get(record.target_user_id))
                if record.target_user_id is not None
                else None,
                task=task,
                note=note,
            )
        )
    return views


__all__ = ["build_activity_views"]
