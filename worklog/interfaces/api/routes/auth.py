"""Endpoints for account registration and token issuance."""

import logging
from datetime import timedelta

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from worklog.application.use_cases.activities import best_effort_append
from worklog.application.use_cases.users import (
    AuthenticationStatus,
    account_created_activity,
    authenticate_user,
    record_login,
    register_user,
)
from worklog.config import get_settings
from worklog.infrastructure.database import SessionLocal, get_db
from worklog.infrastructure.security import create_access_token
from worklog.interfaces.api.dependencies import password_signature
from worklog.interfaces.api.schemas import (
    ApiResponse,
    RegisterRequest,
    Token,
    UserRead,
    success,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post(
    "/register",
    response_model=ApiResponse[UserRead],
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """Create an account. Its creation is logged after the response is sent."""

    user = register_user(db, name=payload.name, email=payload.email, password=payload.password)
    background_tasks.add_task(best_effort_append, SessionLocal, account_created_activity(user))
    logger.info("Registered user %s", user.id)
    return success(UserRead.model_validate(user), "User registered successfully")


# OAuth2PasswordRequestForm sends the e-mail in the ``username`` field.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate the user by e-mail and return a JWT bearer token."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": user.email, "role": user.role, "pwd_sig": password_signature(user)},
        expires_delta=timedelta(minutes=get_settings().access_token_expire_minutes),
    )
    record_login(db, user.id)
    return {"access_token": access_token, "token_type": "bearer", "role": user.role}


__all__ = ["router"]
