"""Pydantic schemas exposed by the HTTP layer."""

from .activity import (
    ActivityCreate,
    ActivityPageRead,
    ActivityRead,
    EntitySummaryRead,
    UserSummaryRead,
)
from .auth import RegisterRequest, Token
from .common import ApiResponse, CamelModel, CountRead, PageRead, success
from .note import NoteCreate, NoteRead, NoteUpdate
from .notification import NotificationPageRead, NotificationRead
from .task import CommentCreate, CommentRead, TaskAssign, TaskCreate, TaskRead, TaskUpdate
from .user import AvatarUpdate, PasswordChange, PreferencesUpdate, ProfileUpdate, UserRead

__all__ = [
    "ActivityCreate",
    "ActivityPageRead",
    "ActivityRead",
    "ApiResponse",
    "AvatarUpdate",
    "CamelModel",
    "CommentCreate",
    "CommentRead",
    "CountRead",
    "EntitySummaryRead",
    "NoteCreate",
    "NoteRead",
    "NoteUpdate",
    "NotificationPageRead",
    "NotificationRead",
    "PageRead",
    "PasswordChange",
    "PreferencesUpdate",
    "ProfileUpdate",
    "RegisterRequest",
    "TaskAssign",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "Token",
    "UserRead",
    "UserSummaryRead",
    "success",
]
