"""Persistence layer for tasks."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from worklog.domain.entities import Task
from worklog.infrastructure.models import TaskModel
from worklog.utils import ensure_app_naive_datetime, ensure_app_timezone


class TaskRepository:
    """Provide CRUD operations for :class:`Task` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, task_id: int) -> Task | None:
        model = self.session.get(TaskModel, task_id)
        return self._to_entity(model) if model else None

    def exists(self, task_id: int) -> bool:
        query = self.session.query(TaskModel.id).filter(TaskModel.id == task_id)
        return query.first() is not None

    def get_titles(self, task_ids: Iterable[int | None]) -> dict[int, str]:
        ids = {task_id for task_id in task_ids if task_id is not None}
        if not ids:
            return {}
        rows = self.session.query(TaskModel.id, TaskModel.title).filter(
            TaskModel.id.in_(ids)
        )
        return {task_id: title for task_id, title in rows}

    def create(self, task: Task) -> Task:
        model = TaskModel()
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, task: Task) -> Task:
        model = self.session.get(TaskModel, task.id)
        if model is None:
            msg = f"Task with id {task.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, task_id: int) -> bool:
        """Delete the task; its comments go with it through the cascade."""

        model = self.session.get(TaskModel, task_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: TaskModel, task: Task) -> None:
        model.title = task.title
        model.description = task.description
        model.status = task.status
        model.due_date = ensure_app_naive_datetime(task.due_date)
        model.is_archived = task.is_archived
        model.owner_id = task.owner_id
        model.assignee_id = task.assignee_id

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            status=model.status,
            due_date=ensure_app_timezone(model.due_date),
            is_archived=model.is_archived,
            owner_id=model.owner_id,
            assignee_id=model.assignee_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["TaskRepository"]
