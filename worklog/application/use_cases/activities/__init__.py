"""Use cases for writing to and reading from the activity ledger."""

from .history import HISTORY_LIMIT, get_note_history, get_task_history
from .queries import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    RECENT_ACTIVITY_LIMIT,
    get_activity,
    get_user_activities,
    get_user_related_activities,
    query_activities,
)
from .record import best_effort_append, record_activities, record_activity
from .references import EntityReferenceResolver
from .views import build_activity_views

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "EntityReferenceResolver",
    "HISTORY_LIMIT",
    "MAX_LIMIT",
    "RECENT_ACTIVITY_LIMIT",
    "best_effort_append",
    "build_activity_views",
    "get_activity",
    "get_note_history",
    "get_task_history",
    "get_user_activities",
    "get_user_related_activities",
    "query_activities",
    "record_activities",
    "record_activity",
]
