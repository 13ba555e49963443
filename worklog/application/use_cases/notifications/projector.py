"""Project activity views into user-facing notifications.

Nothing produced here is stored. Wording depends on whether the viewer is
the actor of the activity, and ``is_read`` depends only on the record age.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from worklog.domain.entities import (
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    AccountEvent,
    ActivityType,
    ActivityView,
    NoteEvent,
    NotificationView,
    TaskEvent,
)

UNTITLED = "Untitled"
UNKNOWN_USER = "Someone"


@dataclass(frozen=True)
class _Wording:
    title: str
    own: str
    other: str
    category: str
    priority: str


_WORDING: dict[ActivityType, _Wording] = {
    ActivityType.TASK_CREATED: _Wording(
        "Task created",
        'You created the task "{task}"',
        '{actor} created the task "{task}"',
        "task",
        PRIORITY_MEDIUM,
    ),
    ActivityType.TASK_UPDATED: _Wording(
        "Task updated",
        'You updated the task "{task}"',
        '{actor} updated the task "{task}"',
        "task",
        PRIORITY_LOW,
    ),
    ActivityType.TASK_STATUS_CHANGED: _Wording(
        "Task status changed",
        'You changed the status of "{task}"',
        '{actor} changed the status of "{task}"',
        "task",
        PRIORITY_LOW,
    ),
    ActivityType.TASK_ASSIGNED: _Wording(
        "Task assigned",
        'You assigned "{task}" to {target}',
        '{actor} assigned you to the task "{task}"',
        "task",
        PRIORITY_HIGH,
    ),
    ActivityType.TASK_UNASSIGNED: _Wording(
        "Task unassigned",
        'You removed {target} from "{task}"',
        '{actor} removed you from the task "{task}"',
        "task",
        PRIORITY_MEDIUM,
    ),
    ActivityType.TASK_COMPLETED: _Wording(
        "Task completed",
        'You completed the task "{task}"',
        '{actor} completed the task "{task}"',
        "completion",
        PRIORITY_MEDIUM,
    ),
    ActivityType.TASK_REOPENED: _Wording(
        "Task reopened",
        'You reopened the task "{task}"',
        '{actor} reopened the task "{task}"',
        "task",
        PRIORITY_MEDIUM,
    ),
    ActivityType.TASK_ARCHIVED: _Wording(
        "Task archived",
        'You archived the task "{task}"',
        '{actor} archived the task "{task}"',
        "task",
        PRIORITY_LOW,
    ),
    ActivityType.ATTACHMENT_ADDED: _Wording(
        "Attachment added",
        'You attached a file to "{task}"',
        '{actor} attached a file to "{task}"',
        "task",
        PRIORITY_LOW,
    ),
    ActivityType.DUE_DATE_CHANGED: _Wording(
        "Due date changed",
        'You changed the due date of "{task}"',
        '{actor} changed the due date of "{task}"',
        "reminder",
        PRIORITY_HIGH,
    ),
    ActivityType.COMMENT_ADDED: _Wording(
        "New comment",
        'You commented on the task "{task}"',
        '{actor} commented on the task "{task}"',
        "comment",
        PRIORITY_LOW,
    ),
    ActivityType.NOTE_CREATED: _Wording(
        "New note",
        'You created the note "{note}"',
        '{actor} created the note "{note}"',
        "note",
        PRIORITY_LOW,
    ),
    ActivityType.NOTE_UPDATED: _Wording(
        "Note updated",
        'You updated the note "{note}"',
        '{actor} updated the note "{note}"',
        "note",
        PRIORITY_LOW,
    ),
    ActivityType.NOTE_PINNED: _Wording(
        "Note pinned",
        'You pinned the note "{note}"',
        '{actor} pinned the note "{note}"',
        "note",
        PRIORITY_LOW,
    ),
    ActivityType.NOTE_UNPINNED: _Wording(
        "Note unpinned",
        'You unpinned the note "{note}"',
        '{actor} unpinned the note "{note}"',
        "note",
        PRIORITY_LOW,
    ),
    ActivityType.NOTE_DELETED: _Wording(
        "Note deleted",
        "You deleted a note",
        "{actor} deleted a note",
        "note",
        PRIORITY_LOW,
    ),
    ActivityType.PROFILE_UPDATED: _Wording(
        "Profile updated",
        "You updated your profile",
        "{actor} updated your profile",
        "system",
        PRIORITY_LOW,
    ),
    ActivityType.AVATAR_CHANGED: _Wording(
        "Avatar changed",
        "You changed your avatar",
        "{actor} changed your avatar",
        "system",
        PRIORITY_LOW,
    ),
    ActivityType.PREFERENCES_UPDATED: _Wording(
        "Preferences updated",
        "You updated your preferences",
        "{actor} updated your preferences",
        "system",
        PRIORITY_LOW,
    ),
    ActivityType.PASSWORD_CHANGED: _Wording(
        "Password changed",
        "You changed your password",
        "{actor} changed your password",
        "security",
        PRIORITY_MEDIUM,
    ),
}


def is_read(created_at: datetime, *, now: datetime, read_window: timedelta) -> bool:
    """A notification counts as read once it is older than ``read_window``."""

    return created_at < now - read_window


def project_activity(
    view: ActivityView,
    viewer_id: int,
    *,
    now: datetime,
    read_window: timedelta,
) -> NotificationView:
    """Map one activity view to the notification shown to ``viewer_id``."""

    record = view.record
    event = record.event()
    wording = _WORDING.get(event.kind) if event is not None else None

    if event is None or wording is None:
        return NotificationView(
            id=record.id,
            activity_type=record.type,
            title="System activity",
            message=record.description or "New activity recorded",
            category="system",
            priority=PRIORITY_LOW,
            timestamp=record.created_at,
            is_read=is_read(record.created_at, now=now, read_window=read_window),
        )

    match event:
        case TaskEvent(task_id=task_id):
            related_id, related_kind = task_id, "task"
        case NoteEvent(note_id=note_id):
            related_id, related_kind = note_id, "note"
        case AccountEvent():
            related_id = record.target_user_id or record.actor_id
            related_kind = "user"

    template = wording.own if record.actor_id == viewer_id else wording.other
    message = template.format(
        actor=_display_name(view.actor),
        target=_display_name(view.target_user),
        task=view.task.title if view.task else UNTITLED,
        note=view.note.title if view.note else UNTITLED,
    )
    return NotificationView(
        id=record.id,
        activity_type=record.type,
        title=wording.title,
        message=message,
        category=wording.category,
        priority=wording.priority,
        timestamp=record.created_at,
        is_read=is_read(record.created_at, now=now, read_window=read_window),
        related_id=related_id,
        related_kind=related_kind,
    )


def _display_name(summary) -> str:
    if summary is None:
        return UNKNOWN_USER
    return summary.name or summary.email


__all__ = ["is_read", "project_activity"]
