"""Persistence layer for notes."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from worklog.domain.entities import Note
from worklog.infrastructure.models import NoteModel
from worklog.utils import ensure_app_timezone


class NoteRepository:
    """Provide CRUD operations for :class:`Note` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, note_id: int) -> Note | None:
        model = self.session.get(NoteModel, note_id)
        return self._to_entity(model) if model else None

    def exists(self, note_id: int) -> bool:
        query = self.session.query(NoteModel.id).filter(NoteModel.id == note_id)
        return query.first() is not None

    def get_titles(self, note_ids: Iterable[int | None]) -> dict[int, str]:
        ids = {note_id for note_id in note_ids if note_id is not None}
        if not ids:
            return {}
        rows = self.session.query(NoteModel.id, NoteModel.title).filter(
            NoteModel.id.in_(ids)
        )
        return {note_id: title for note_id, title in rows}

    def create(self, note: Note) -> Note:
        model = NoteModel()
        self._apply_entity_to_model(model, note)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, note: Note) -> Note:
        model = self.session.get(NoteModel, note.id)
        if model is None:
            msg = f"Note with id {note.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, note)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, note_id: int) -> bool:
        model = self.session.get(NoteModel, note_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: NoteModel, note: Note) -> None:
        model.title = note.title
        model.content = note.content
        model.category = note.category
        model.is_pinned = note.is_pinned
        model.owner_id = note.owner_id

    @staticmethod
    def _to_entity(model: NoteModel) -> Note:
        return Note(
            id=model.id,
            title=model.title,
            content=model.content,
            category=model.category,
            is_pinned=model.is_pinned,
            owner_id=model.owner_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NoteRepository"]
