"""Existence checks for the entities an activity refers to."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.orm import Session

from worklog.domain.entities import (
    AccountEvent,
    ActivityRecordInput,
    NoteEvent,
    TaskEvent,
)
from worklog.domain.exceptions import ReferenceNotFound, ValidationError
from worklog.infrastructure.repositories import (
    NoteRepository,
    TaskRepository,
    UserRepository,
)


class EntityReferenceResolver:
    """Reject activities that point at tasks, notes or users that do not exist.

    Checks run once, before the ledger write. A task or note reference is only
    accepted on events of that category. Account events without an explicit
    target are about the actor, so the actor becomes the target.
    """

    def __init__(
        self,
        session: Session,
        *,
        tasks: TaskRepository | None = None,
        notes: NoteRepository | None = None,
        users: UserRepository | None = None,
    ) -> None:
        self.tasks = tasks or TaskRepository(session)
        self.notes = notes or NoteRepository(session)
        self.users = users or UserRepository(session)

    def ensure_references(self, record: ActivityRecordInput) -> ActivityRecordInput:
        """Return ``record`` (possibly with a defaulted target) once it is valid."""

        try:
            event = record.event()
        except ValueError as exc:
            raise ValidationError(f"Invalid activity type '{record.type}'") from exc

        match event:
            case TaskEvent(task_id=None):
                raise ValidationError("Task activities require a task reference")
            case TaskEvent(task_id=task_id):
                if record.note_id is not None:
                    raise ValidationError("Task activities cannot reference a note")
                if not self.tasks.exists(task_id):
                    raise ReferenceNotFound("task", task_id)
            case NoteEvent(note_id=None):
                raise ValidationError("Note activities require a note reference")
            case NoteEvent(note_id=note_id):
                if record.task_id is not None:
                    raise ValidationError("Note activities cannot reference a task")
                if not self.notes.exists(note_id):
                    raise ReferenceNotFound("note", note_id)
            case AccountEvent():
                if record.task_id is not None or record.note_id is not None:
                    raise ValidationError(
                        "Account activities cannot reference a task or note"
                    )
                if record.target_user_id is None:
                    record = replace(record, target_user_id=record.actor_id)

        if record.target_user_id is not None and not self.users.exists(
            record.target_user_id
        ):
            raise ReferenceNotFound("user", record.target_user_id)
        return record


__all__ = ["EntityReferenceResolver"]
