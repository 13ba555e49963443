"""Domain entities exposed by the application."""

from .activity import (
    AccountEvent,
    ActivityCategory,
    ActivityEvent,
    ActivityFilter,
    ActivityRecord,
    ActivityRecordInput,
    ActivityType,
    ActivityView,
    EntitySummary,
    NoteEvent,
    TaskEvent,
    UserSummary,
    build_event,
)
from .comment import Comment
from .note import NOTE_CATEGORIES, Note
from .notification import (
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    NotificationView,
)
from .pagination import NotificationPage, Page, clamp_page, total_pages
from .task import (
    TASK_STATUS_DONE,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_IN_REVIEW,
    TASK_STATUS_TODO,
    TASK_STATUSES,
    Task,
)
from .user import USER_ROLE_ADMIN, USER_ROLE_MANAGER, USER_ROLE_USER, USER_ROLES, User

__all__ = [
    "AccountEvent",
    "ActivityCategory",
    "ActivityEvent",
    "ActivityFilter",
    "ActivityRecord",
    "ActivityRecordInput",
    "ActivityType",
    "ActivityView",
    "Comment",
    "EntitySummary",
    "NOTE_CATEGORIES",
    "Note",
    "NoteEvent",
    "NotificationPage",
    "NotificationView",
    "PRIORITY_HIGH",
    "PRIORITY_LOW",
    "PRIORITY_MEDIUM",
    "Page",
    "TASK_STATUSES",
    "TASK_STATUS_DONE",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_IN_REVIEW",
    "TASK_STATUS_TODO",
    "Task",
    "TaskEvent",
    "USER_ROLES",
    "USER_ROLE_ADMIN",
    "USER_ROLE_MANAGER",
    "USER_ROLE_USER",
    "User",
    "UserSummary",
    "build_event",
    "clamp_page",
    "total_pages",
]
