"""Domain entities describing the activity ledger."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ActivityCategory(str, Enum):
    """Entity class an activity is recorded against."""

    TASK = "task"
    NOTE = "note"
    ACCOUNT = "account"


class ActivityType(str, Enum):
    """Closed set of events that can be written to the ledger."""

    TASK_CREATED = "task_created"
    TASK_UPDATED = "task_updated"
    TASK_STATUS_CHANGED = "task_status_changed"
    TASK_ASSIGNED = "task_assigned"
    TASK_UNASSIGNED = "task_unassigned"
    TASK_COMPLETED = "task_completed"
    TASK_REOPENED = "task_reopened"
    TASK_ARCHIVED = "task_archived"
    ATTACHMENT_ADDED = "attachment_added"
    DUE_DATE_CHANGED = "due_date_changed"
    COMMENT_ADDED = "comment_added"

    NOTE_CREATED = "note_created"
    NOTE_UPDATED = "note_updated"
    NOTE_PINNED = "note_pinned"
    NOTE_UNPINNED = "note_unpinned"
    NOTE_DELETED = "note_deleted"

    PROFILE_UPDATED = "profile_updated"
    AVATAR_CHANGED = "avatar_changed"
    PREFERENCES_UPDATED = "preferences_updated"
    PASSWORD_CHANGED = "password_changed"

    @property
    def category(self) -> ActivityCategory:
        return _CATEGORY_BY_TYPE[self]

    @classmethod
    def parse(cls, value: "ActivityType | str") -> "ActivityType | None":
        """Return the enum member for ``value`` or ``None`` when unknown."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


_TASK_TYPES = frozenset(
    {
        ActivityType.TASK_CREATED,
        ActivityType.TASK_UPDATED,
        ActivityType.TASK_STATUS_CHANGED,
        ActivityType.TASK_ASSIGNED,
        ActivityType.TASK_UNASSIGNED,
        ActivityType.TASK_COMPLETED,
        ActivityType.TASK_REOPENED,
        ActivityType.TASK_ARCHIVED,
        ActivityType.ATTACHMENT_ADDED,
        ActivityType.DUE_DATE_CHANGED,
        ActivityType.COMMENT_ADDED,
    }
)
_NOTE_TYPES = frozenset(
    {
        ActivityType.NOTE_CREATED,
        ActivityType.NOTE_UPDATED,
        ActivityType.NOTE_PINNED,
        ActivityType.NOTE_UNPINNED,
        ActivityType.NOTE_DELETED,
    }
)

_CATEGORY_BY_TYPE: dict[ActivityType, ActivityCategory] = {
    activity_type: (
        ActivityCategory.TASK
        if activity_type in _TASK_TYPES
        else ActivityCategory.NOTE
        if activity_type in _NOTE_TYPES
        else ActivityCategory.ACCOUNT
    )
    for activity_type in ActivityType
}


@dataclass(frozen=True)
class TaskEvent:
    task_id: int | None
    kind: ActivityType


@dataclass(frozen=True)
class NoteEvent:
    note_id: int | None
    kind: ActivityType


@dataclass(frozen=True)
class AccountEvent:
    kind: ActivityType


ActivityEvent = TaskEvent | NoteEvent | AccountEvent


def build_event(
    kind: ActivityType, *, task_id: int | None, note_id: int | None
) -> ActivityEvent:
    """Return the variant matching the category of ``kind``."""

    match kind.category:
        case ActivityCategory.TASK:
            return TaskEvent(task_id=task_id, kind=kind)
        case ActivityCategory.NOTE:
            return NoteEvent(note_id=note_id, kind=kind)
        case ActivityCategory.ACCOUNT:
            return AccountEvent(kind=kind)
    raise AssertionError(f"Unhandled activity category: {kind.category}")


@dataclass
class ActivityRecordInput:
    """Values supplied by a workflow that wants to append to the ledger."""

    type: ActivityType | str
    actor_id: int
    description: str
    task_id: int | None = None
    note_id: int | None = None
    target_user_id: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def type_value(self) -> str:
        if isinstance(self.type, ActivityType):
            return self.type.value
        return str(self.type)

    def event(self) -> ActivityEvent:
        """Return the typed event variant for this input.

        Raises ``ValueError`` when ``type`` is not part of :class:`ActivityType`.
        """

        return build_event(
            ActivityType(self.type), task_id=self.task_id, note_id=self.note_id
        )


@dataclass(frozen=True)
class ActivityRecord:
    """An immutable row of the activity ledger."""

    id: int
    type: str
    actor_id: int
    description: str
    created_at: datetime
    task_id: int | None = None
    note_id: int | None = None
    target_user_id: int | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def event(self) -> ActivityEvent | None:
        """Return the typed event, or ``None`` for a type no longer known."""

        kind = ActivityType.parse(self.type)
        if kind is None:
            return None
        return build_event(kind, task_id=self.task_id, note_id=self.note_id)


@dataclass
class ActivityFilter:
    """Conjunctive filter applied to ledger listings.

    ``related_user_id`` matches rows where the user is either the actor or
    the target.
    """

    task_id: int | None = None
    note_id: int | None = None
    actor_id: int | None = None
    target_user_id: int | None = None
    related_user_id: int | None = None
    types: Sequence[str] = ()
    created_start: datetime | None = None
    created_end: datetime | None = None


@dataclass(frozen=True)
class UserSummary:
    id: int
    name: str
    email: str
    avatar: str | None = None


@dataclass(frozen=True)
class EntitySummary:
    id: int
    title: str


@dataclass(frozen=True)
class ActivityView:
    """A ledger record joined with display data for the entities it names.

    Joined summaries are ``None`` when the referenced entity no longer exists.
    """

    record: ActivityRecord
    actor: UserSummary | None
    target_user: UserSummary | None
    task: EntitySummary | None
    note: EntitySummary | None


__all__ = [
    "AccountEvent",
    "ActivityCategory",
    "ActivityEvent",
    "ActivityFilter",
    "ActivityRecord",
    "ActivityRecordInput",
    "ActivityType",
    "ActivityView",
    "EntitySummary",
    "NoteEvent",
    "TaskEvent",
    "UserSummary",
    "build_event",
]
