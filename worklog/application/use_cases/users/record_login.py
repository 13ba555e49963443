"""Use case for registering the last login of a user."""

from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import record_activity
from worklog.domain.entities import ActivityRecordInput, ActivityType
from worklog.infrastructure.repositories import UserRepository
from worklog.utils import now_in_app_timezone


def record_login(session: Session, user_id: int) -> None:
    """Persist the last login timestamp and log the login in the ledger."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if not user:
        return

    previous_login = user.last_login
    user.last_login = now_in_app_timezone()
    repository.update(user)

    record_activity(
        session,
        ActivityRecordInput(
            type=ActivityType.PROFILE_UPDATED,
            actor_id=user_id,
            target_user_id=user_id,
            description="User logged in",
            metadata={
                "previousLogin": previous_login.isoformat() if previous_login else None
            },
        ),
    )
