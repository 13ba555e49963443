"""Filtered, paginated read access over the activity ledger."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from worklog.domain.entities import (
    ActivityFilter,
    ActivityType,
    ActivityView,
    Page,
    total_pages,
)
from worklog.domain.exceptions import NotFound, ValidationError
from worklog.infrastructure.repositories import ActivityRepository
from worklog.utils import ensure_app_timezone

from .views import build_activity_views

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_SORT_BY = "createdAt"
DEFAULT_SORT_ORDER = "desc"
RECENT_ACTIVITY_LIMIT = 20


def _normalize_types(types: Sequence[str | ActivityType]) -> tuple[str, ...]:
    normalized: list[str] = []
    for value in types:
        activity_type = ActivityType.parse(value)
        if activity_type is None:
            raise ValidationError(f"Invalid activity type '{value}'")
        normalized.append(activity_type.value)
    return tuple(normalized)


def query_activities(
    session: Session,
    activity_filter: ActivityFilter,
    *,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
    sort_by: str = DEFAULT_SORT_BY,
    sort_order: str = DEFAULT_SORT_ORDER,
) -> Page[ActivityView]:
    """Return one page of activities matching every supplied filter field.

    A page past the end is clamped to the last page, so a non-empty result
    set never comes back empty because of the page number.
    """

    if page < 1:
        raise ValidationError("Page must be greater than or equal to 1")
    if not 1 <= limit <= MAX_LIMIT:
        raise ValidationError(f"Limit must be between 1 and {MAX_LIMIT}")
    created_start = ensure_app_timezone(activity_filter.created_start)
    created_end = ensure_app_timezone(activity_filter.created_end)
    if created_start is not None and created_end is not None and created_start > created_end:
        raise ValidationError("createdStart must not be later than createdEnd")

    activity_filter = replace(
        activity_filter,
        types=_normalize_types(activity_filter.types),
        created_start=created_start,
        created_end=created_end,
    )
    records, total, current_page = ActivityRepository(session).find_page(
        activity_filter,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return Page(
        items=build_activity_views(session, records),
        total=total,
        page=current_page,
        limit=limit,
        pages=total_pages(total, limit),
    )


def get_activity(session: Session, activity_id: int) -> ActivityView:
    """Return the activity identified by ``activity_id`` or raise ``NotFound``."""

    record = ActivityRepository(session).get(activity_id)
    if record is None:
        raise NotFound("Activity not found")
    return build_activity_views(session, [record])[0]


def _recent(session: Session, activity_filter: ActivityFilter, limit: int) -> list[ActivityView]:
    if limit < 1:
        raise ValidationError("Limit must be greater than or equal to 1")
    records = ActivityRepository(session).find_many(activity_filter, limit=limit)
    return build_activity_views(session, records)


def get_user_activities(
    session: Session, user_id: int, *, limit: int = RECENT_ACTIVITY_LIMIT
) -> list[ActivityView]:
    """Most recent activities performed by ``user_id``."""

    return _recent(session, ActivityFilter(actor_id=user_id), limit)


def get_user_related_activities(
    session: Session, user_id: int, *, limit: int = RECENT_ACTIVITY_LIMIT
) -> list[ActivityView]:
    """Most recent activities where ``user_id`` is the actor or the target."""

    return _recent(session, ActivityFilter(related_user_id=user_id), limit)


__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "RECENT_ACTIVITY_LIMIT",
    "get_activity",
    "get_user_activities",
    "get_user_related_activities",
    "query_activities",
]
