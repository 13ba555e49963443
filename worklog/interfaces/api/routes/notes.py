"""Endpoints for notes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from worklog.application.use_cases.notes import (
    create_note,
    delete_note,
    get_note,
    toggle_pin,
    update_note,
)
from worklog.domain.entities import Note, User
from worklog.infrastructure.database import get_db
from worklog.interfaces.api.dependencies import get_current_active_user
from worklog.interfaces.api.schemas import (
    ApiResponse,
    NoteCreate,
    NoteRead,
    NoteUpdate,
    success,
)

router = APIRouter(prefix="/notes", tags=["notes"])


def _to_read_model(note: Note) -> NoteRead:
    return NoteRead.model_validate(note)


@router.post("", response_model=ApiResponse[NoteRead], status_code=status.HTTP_201_CREATED)
def create_note_endpoint(
    payload: NoteCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    note = create_note(
        db,
        owner_id=current_user.id,
        title=payload.title,
        content=payload.content,
        category=payload.category,
        is_pinned=payload.is_pinned,
    )
    return success(_to_read_model(note), "Note created")


@router.get("/{note_id}", response_model=ApiResponse[NoteRead])
def read_note(
    note_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return success(_to_read_model(get_note(db, note_id)))


@router.patch("/{note_id}", response_model=ApiResponse[NoteRead])
def update_note_endpoint(
    note_id: int,
    payload: NoteUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    note = update_note(
        db,
        note_id,
        actor_id=current_user.id,
        changes=payload.model_dump(exclude_unset=True),
    )
    return success(_to_read_model(note), "Note updated")


@router.patch("/{note_id}/pin", response_model=ApiResponse[NoteRead])
def toggle_note_pin(
    note_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    note = toggle_pin(db, note_id, actor_id=current_user.id)
    return success(_to_read_model(note), "Note pinned" if note.is_pinned else "Note unpinned")


@router.delete("/{note_id}", response_model=ApiResponse[None])
def delete_note_endpoint(
    note_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    delete_note(db, note_id, actor_id=current_user.id)
    return success(message="Note deleted")


__all__ = ["router"]
