"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from worklog.domain.entities import User
from worklog.domain.exceptions import NotFound
from worklog.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFound("User not found")
    return user
