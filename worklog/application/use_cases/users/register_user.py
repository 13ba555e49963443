"""Use case for self-service account registration."""

from sqlalchemy.orm import Session

from worklog.domain.entities import ActivityRecordInput, ActivityType, User
from worklog.domain.exceptions import Conflict
from worklog.infrastructure.repositories import UserRepository
from worklog.infrastructure.security import get_password_hash


def register_user(session: Session, *, name: str, email: str, password: str) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    if repository.get_by_email(email, include_deleted=True):
        raise Conflict("Email is already in use")

    user = User(
        id=None,
        name=name,
        email=email,
        password=get_password_hash(password),
    )
    return repository.create(user)


def account_created_activity(user: User) -> ActivityRecordInput:
    """Activity documenting the creation of ``user``'s account."""

    return ActivityRecordInput(
        type=ActivityType.PROFILE_UPDATED,
        actor_id=user.id,
        target_user_id=user.id,
        description="User account created",
    )
