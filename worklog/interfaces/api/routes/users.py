"""Endpoints for the authenticated user's own account."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from worklog.application.use_cases.users import (
    change_avatar,
    change_password,
    get_user,
    update_preferences,
    update_profile,
)
from worklog.domain.entities import User
from worklog.infrastructure.database import get_db
from worklog.interfaces.api.dependencies import get_current_active_user
from worklog.interfaces.api.schemas import (
    ApiResponse,
    AvatarUpdate,
    PasswordChange,
    PreferencesUpdate,
    ProfileUpdate,
    UserRead,
    success,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.get("/me", response_model=ApiResponse[UserRead])
def read_current_user(current_user: User = Depends(get_current_active_user)):
    return success(_to_read_model(current_user))


@router.patch("/me", response_model=ApiResponse[UserRead])
def update_current_user(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    user = update_profile(db, current_user.id, payload.model_dump(exclude_unset=True))
    return success(_to_read_model(user), "Profile updated")


@router.put("/me/avatar", response_model=ApiResponse[UserRead])
def update_current_user_avatar(
    payload: AvatarUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    user = change_avatar(db, current_user.id, payload.avatar)
    return success(_to_read_model(user), "Avatar updated")


@router.put("/me/preferences", response_model=ApiResponse[UserRead])
def update_current_user_preferences(
    payload: PreferencesUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    user = update_preferences(db, current_user.id, payload.preferences)
    return success(_to_read_model(user), "Preferences updated")


@router.put("/me/password", response_model=ApiResponse[None])
def change_current_user_password(
    payload: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Change the password; tokens issued before the change stop working."""

    change_password(
        db,
        current_user.id,
        current_password=payload.current_password,
        new_password=payload.new_password,
    )
    return success(message="Password changed")


@router.get("/{user_id}", response_model=ApiResponse[UserRead])
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return success(_to_read_model(get_user(db, user_id)))


__all__ = ["router"]
