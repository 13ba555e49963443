"""Use cases that change a user's own account and log it to the ledger."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import record_activity
from worklog.domain.entities import ActivityRecordInput, ActivityType, User
from worklog.domain.exceptions import Conflict, ValidationError
from worklog.infrastructure.repositories import UserRepository
from worklog.infrastructure.security import get_password_hash, verify_password

from .get_user import get_user

_PROFILE_FIELDS = ("name", "email")


def _self_activity(
    user_id: int,
    activity_type: ActivityType,
    description: str,
    metadata: dict[str, Any] | None = None,
) -> ActivityRecordInput:
    return ActivityRecordInput(
        type=activity_type,
        actor_id=user_id,
        target_user_id=user_id,
        description=description,
        metadata=metadata or {},
    )


def update_profile(session: Session, user_id: int, changes: dict[str, Any]) -> User:
    """Apply name/email changes to ``user_id``."""

    unknown = set(changes) - set(_PROFILE_FIELDS)
    if unknown:
        raise ValidationError(f"Unsupported profile fields: {', '.join(sorted(unknown))}")
    if not changes:
        raise ValidationError("No profile changes supplied")

    repository = UserRepository(session)
    user = get_user(session, user_id)
    new_email = changes.get("email")
    if new_email and new_email != user.email:
        if repository.get_by_email(new_email, include_deleted=True):
            raise Conflict("Email is already in use")

    for field_name, value in changes.items():
        setattr(user, field_name, value)
    updated = repository.update(user)

    record_activity(
        session,
        _self_activity(
            user_id,
            ActivityType.PROFILE_UPDATED,
            "User profile updated",
            {"changes": sorted(changes)},
        ),
    )
    return updated


def change_avatar(session: Session, user_id: int, avatar_url: str) -> User:
    repository = UserRepository(session)
    user = get_user(session, user_id)
    user.avatar = avatar_url
    updated = repository.update(user)
    record_activity(
        session,
        _self_activity(user_id, ActivityType.AVATAR_CHANGED, "User avatar updated"),
    )
    return updated


def update_preferences(session: Session, user_id: int, preferences: dict[str, Any]) -> User:
    """Merge ``preferences`` into the stored preferences."""

    if not preferences:
        raise ValidationError("No preferences supplied")

    repository = UserRepository(session)
    user = get_user(session, user_id)
    user.preferences = {**user.preferences, **preferences}
    updated = repository.update(user)
    record_activity(
        session,
        _self_activity(
            user_id,
            ActivityType.PREFERENCES_UPDATED,
            "User preferences updated",
            {"preferences": preferences},
        ),
    )
    return updated


def change_password(
    session: Session, user_id: int, *, current_password: str, new_password: str
) -> None:
    repository = UserRepository(session)
    user = get_user(session, user_id)
    if not verify_password(current_password, user.password):
        raise ValidationError("Current password is incorrect")
    if current_password == new_password:
        raise ValidationError("The new password must differ from the current one")

    user.password = get_password_hash(new_password)
    repository.update(user)
    record_activity(
        session,
        _self_activity(user_id, ActivityType.PASSWORD_CHANGED, "User password changed"),
    )
