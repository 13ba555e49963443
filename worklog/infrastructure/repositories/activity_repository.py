"""Persistence layer for the append-only activity ledger."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from sqlalchemy import asc, desc, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from worklog.domain.entities import (
    ActivityFilter,
    ActivityRecord,
    ActivityRecordInput,
    ActivityType,
    clamp_page,
)
from worklog.domain.exceptions import ValidationError
from worklog.infrastructure.models import ActivityModel
from worklog.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "createdAt": ActivityModel.created_at,
    "type": ActivityModel.type,
}
SORT_ORDERS = ("asc", "desc")


def _type_value(value: ActivityType | str) -> str:
    return value.value if isinstance(value, ActivityType) else str(value)


class ActivityRepository:
    """Append and read :class:`ActivityRecord` rows.

    The repository has no update or delete operation. ``clock`` supplies the
    creation timestamp and can be replaced to simulate time.
    """

    def __init__(
        self,
        session: Session,
        *,
        clock: Callable[[], datetime] = now_in_app_timezone,
    ) -> None:
        self.session = session
        self.clock = clock

    def append(self, record: ActivityRecordInput) -> ActivityRecord:
        return self.append_batch([record])[0]

    def append_batch(self, records: Sequence[ActivityRecordInput]) -> list[ActivityRecord]:
        """Persist ``records`` in one transaction sharing a single timestamp.

        All inputs are validated before anything is written. A storage error
        rolls back the whole batch and is re-raised.
        """

        if not records:
            return []
        for record in records:
            self._validate(record)

        created_at = ensure_app_naive_datetime(self.clock())
        models = [self._to_model(record, created_at) for record in records]
        try:
            self.session.add_all(models)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        for model in models:
            self.session.refresh(model)
        if len(models) > 1:
            logger.info(
                "Appended %d activities (%s)",
                len(models),
                ", ".join(model.type for model in models),
            )
        return [self._to_entity(model) for model in models]

    def get(self, activity_id: int) -> ActivityRecord | None:
        model = self.session.get(ActivityModel, activity_id)
        if model is None:
            return None
        return self._to_entity(model)

    def find_many(
        self,
        activity_filter: ActivityFilter,
        *,
        sort_by: str = "createdAt",
        sort_order: str = "desc",
        offset: int = 0,
        limit: int | None = None,
    ) -> list[ActivityRecord]:
        """Return one slice of matching records.

        Records are ordered by ``sort_by`` in ``sort_order`` with ``id``
        ascending as the tie-break.
        """

        column = SORTABLE_FIELDS.get(sort_by)
        if column is None:
            allowed = ", ".join(SORTABLE_FIELDS)
            raise ValidationError(f"Invalid sort field '{sort_by}'. Allowed: {allowed}")
        if sort_order not in SORT_ORDERS:
            raise ValidationError(f"Invalid sort order '{sort_order}'. Use asc or desc")

        query = self._filtered_query(activity_filter)
        direction = asc if sort_order == "asc" else desc
        query = query.order_by(direction(column), ActivityModel.id.asc())
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def find_page(
        self,
        activity_filter: ActivityFilter,
        *,
        page: int,
        limit: int,
        sort_by: str = "createdAt",
        sort_order: str = "desc",
    ) -> tuple[list[ActivityRecord], int, int]:
        """Return ``(records, total, page)`` counting the matches only once.

        ``page`` is clamped to the last page that holds records.
        """

        total = self.count(activity_filter)
        current_page = clamp_page(page, total, limit)
        records = self.find_many(
            activity_filter,
            sort_by=sort_by,
            sort_order=sort_order,
            offset=(current_page - 1) * limit,
            limit=limit,
        )
        return records, total, current_page

    def count(self, activity_filter: ActivityFilter) -> int:
        return self._filtered_query(activity_filter).count()

    def _filtered_query(self, activity_filter: ActivityFilter) -> Query:
        query = self.session.query(ActivityModel)
        if activity_filter.task_id is not None:
            query = query.filter(ActivityModel.task_id == activity_filter.task_id)
        if activity_filter.note_id is not None:
            query = query.filter(ActivityModel.note_id == activity_filter.note_id)
        if activity_filter.actor_id is not None:
            query = query.filter(ActivityModel.actor_id == activity_filter.actor_id)
        if activity_filter.target_user_id is not None:
            query = query.filter(
                ActivityModel.target_user_id == activity_filter.target_user_id
            )
        if activity_filter.related_user_id is not None:
            query = query.filter(
                or_(
                    ActivityModel.actor_id == activity_filter.related_user_id,
                    ActivityModel.target_user_id == activity_filter.related_user_id,
                )
            )
        if activity_filter.types:
            types = [_type_value(value) for value in activity_filter.types]
            query = query.filter(ActivityModel.type.in_(types))
        if activity_filter.created_start is not None:
            query = query.filter(
                ActivityModel.created_at
                >= ensure_app_naive_datetime(activity_filter.created_start)
            )
        if activity_filter.created_end is not None:
            query = query.filter(
                ActivityModel.created_at
                <= ensure_app_naive_datetime(activity_filter.created_end)
            )
        return query

    @staticmethod
    def _validate(record: ActivityRecordInput) -> None:
        if ActivityType.parse(record.type) is None:
            raise ValidationError(f"Invalid activity type '{record.type}'")
        if not (record.description or "").strip():
            raise ValidationError("Activity description is required")
        if record.actor_id is None:
            raise ValidationError("Activity actor is required")

    @staticmethod
    def _to_model(record: ActivityRecordInput, created_at: datetime | None) -> ActivityModel:
        return ActivityModel(
            type=ActivityType(record.type).value,
            actor_id=record.actor_id,
            target_user_id=record.target_user_id,
            task_id=record.task_id,
            note_id=record.note_id,
            description=record.description,
            details=dict(record.metadata or {}),
            created_at=created_at,
        )

    @staticmethod
    def _to_entity(model: ActivityModel) -> ActivityRecord:
        return ActivityRecord(
            id=model.id,
            type=model.type,
            actor_id=model.actor_id,
            target_user_id=model.target_user_id,
            task_id=model.task_id,
            note_id=model.note_id,
            description=model.description,
            metadata=dict(model.details or {}),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ActivityRepository", "SORTABLE_FIELDS", "SORT_ORDERS"]
