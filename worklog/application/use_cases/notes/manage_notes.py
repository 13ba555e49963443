"""Create, update, pin and delete notes, logging each change to the ledger."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import record_activities, record_activity
from worklog.domain.entities import NOTE_CATEGORIES, ActivityRecordInput, ActivityType, Note
from worklog.domain.exceptions import NotFound, PermissionDenied, ValidationError
from worklog.infrastructure.repositories import NoteRepository

UPDATABLE_FIELDS = ("title", "content", "category", "is_pinned")


def _validate_category(category: str) -> None:
    if category not in NOTE_CATEGORIES:
        raise ValidationError(f"Invalid note category '{category}'")


def _pin_activity(note: Note, actor_id: int) -> ActivityRecordInput:
    if note.is_pinned:
        return ActivityRecordInput(
            type=ActivityType.NOTE_PINNED,
            actor_id=actor_id,
            note_id=note.id,
            description=f"Note pinned: {note.title}",
        )
    return ActivityRecordInput(
        type=ActivityType.NOTE_UNPINNED,
        actor_id=actor_id,
        note_id=note.id,
        description=f"Note unpinned: {note.title}",
    )


def get_note(session: Session, note_id: int) -> Note:
    note = NoteRepository(session).get(note_id)
    if note is None:
        raise NotFound("Note not found")
    return note


def get_owned_note(session: Session, note_id: int, actor_id: int) -> Note:
    note = get_note(session, note_id)
    if note.owner_id != actor_id:
        raise PermissionDenied("Only the note owner can modify this note")
    return note


def create_note(
    session: Session,
    *,
    owner_id: int,
    title: str,
    content: str,
    category: str = "general",
    is_pinned: bool = False,
) -> Note:
    if not title or not title.strip():
        raise ValidationError("Note title is required")
    _validate_category(category)

    note = NoteRepository(session).create(
        Note(
            id=None,
            title=title.strip(),
            content=content,
            category=category,
            is_pinned=is_pinned,
            owner_id=owner_id,
        )
    )
    record_activity(
        session,
        ActivityRecordInput(
            type=ActivityType.NOTE_CREATED,
            actor_id=owner_id,
            note_id=note.id,
            description=f"Note created: {note.title}",
            metadata={"category": note.category, "isPinned": note.is_pinned},
        ),
    )
    return note


def update_note(
    session: Session, note_id: int, *, actor_id: int, changes: dict[str, Any]
) -> Note:
    """Apply ``changes`` and log ``note_updated`` plus any pin change."""

    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unsupported note fields: {', '.join(sorted(unknown))}")
    if "category" in changes:
        _validate_category(changes["category"])
    if "title" in changes and not (changes["title"] or "").strip():
        raise ValidationError("Note title is required")

    note = get_owned_note(session, note_id, actor_id)
    changed = sorted(
        name for name, value in changes.items() if getattr(note, name) != value
    )
    if not changed:
        return note

    for name in changed:
        setattr(note, name, changes[name])
    updated = NoteRepository(session).update(note)

    activities = [
        ActivityRecordInput(
            type=ActivityType.NOTE_UPDATED,
            actor_id=actor_id,
            note_id=updated.id,
            description=f"Note updated: {updated.title}",
            metadata={"changes": changed},
        )
    ]
    if "is_pinned" in changed:
        activities.append(_pin_activity(updated, actor_id))
    record_activities(session, activities)
    return updated


def set_pin(session: Session, note_id: int, *, actor_id: int, is_pinned: bool) -> Note:
    """Pin or unpin the note; nothing is logged when the flag is unchanged."""

    note = get_owned_note(session, note_id, actor_id)
    if note.is_pinned == is_pinned:
        return note

    note.is_pinned = is_pinned
    updated = NoteRepository(session).update(note)
    record_activity(session, _pin_activity(updated, actor_id))
    return updated


def toggle_pin(session: Session, note_id: int, *, actor_id: int) -> Note:
    note = get_owned_note(session, note_id, actor_id)
    return set_pin(session, note_id, actor_id=actor_id, is_pinned=not note.is_pinned)


def delete_note(session: Session, note_id: int, *, actor_id: int) -> None:
    """Log the deletion while the note still exists, then remove it."""

    note = get_owned_note(session, note_id, actor_id)
    record_activity(
        session,
        ActivityRecordInput(
            type=ActivityType.NOTE_DELETED,
            actor_id=actor_id,
            note_id=note.id,
            description=f"Note deleted: {note.title}",
            metadata={"title": note.title},
        ),
    )
    NoteRepository(session).delete(note.id)
