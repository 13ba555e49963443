"""Persistence layer for task comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from worklog.domain.entities import Comment
from worklog.infrastructure.models import CommentModel
from worklog.utils import ensure_app_timezone


class CommentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(CommentModel, comment_id)
        return self._to_entity(model) if model else None

    def list_for_task(self, task_id: int) -> Sequence[Comment]:
        query = (
            self.session.query(CommentModel)
            .filter(CommentModel.task_id == task_id)
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            task_id=comment.task_id,
            author_id=comment.author_id,
            parent_id=comment.parent_id,
            content=comment.content,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            task_id=model.task_id,
            author_id=model.author_id,
            parent_id=model.parent_id,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["CommentRepository"]
