"""FastAPI dependency utilities."""

from hashlib import sha256

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from worklog.domain.entities import User
from worklog.infrastructure.database import get_db
from worklog.infrastructure.repositories import UserRepository
from worklog.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

_INVALID_CREDENTIALS = "Invalid credentials"


def password_signature(user: User) -> str:
    """Fingerprint embedded in tokens so a password change revokes them."""

    return sha256(f"{user.password}:{int(user.is_active)}".encode()).hexdigest()


def _unauthorized(detail: str = _INVALID_CREDENTIALS) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    email = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(email, str) or not isinstance(signature_claim, str):
        raise _unauthorized()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _unauthorized("User not found")
    if signature_claim != password_signature(user):
        raise _unauthorized()
    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return current_user
