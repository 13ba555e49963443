"""Shared fixtures: an in-memory database rebuilt for every test."""

from __future__ import annotations

import itertools
import os
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["NOTIFICATION_READ_WINDOW_DAYS"] = "7"

from worklog.config import get_settings  # noqa: E402

get_settings.cache_clear()

from fastapi.testclient import TestClient  # noqa: E402

from worklog.domain.entities import Note, Task, User  # noqa: E402
from worklog.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from worklog.infrastructure.repositories import (  # noqa: E402
    NoteRepository,
    TaskRepository,
    UserRepository,
)
from worklog.infrastructure.security import (  # noqa: E402
    create_access_token,
    get_password_hash,
)
from worklog.interfaces.api.dependencies import password_signature  # noqa: E402

DEFAULT_PASSWORD = "Secret123"
_PASSWORD_HASH = get_password_hash(DEFAULT_PASSWORD)

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from an empty schema."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session) -> Callable[..., User]:
    counter = itertools.count(1)

    def _make_user(name: str | None = None, email: str | None = None, role: str = "user") -> User:
        index = next(counter)
        return UserRepository(db_session).create(
            User(
                id=None,
                name=name or f"User {index}",
                email=email or f"user{index}@example.com",
                password=_PASSWORD_HASH,
                role=role,
            )
        )

    return _make_user


@pytest.fixture()
def make_task(db_session) -> Callable[..., Task]:
    """Insert a task directly, without writing to the ledger."""

    def _make_task(owner: User, title: str = "Write report", **fields) -> Task:
        return TaskRepository(db_session).create(
            Task(id=None, title=title, owner_id=owner.id, **fields)
        )

    return _make_task


@pytest.fixture()
def make_note(db_session) -> Callable[..., Note]:
    """Insert a note directly, without writing to the ledger."""

    def _make_note(owner: User, title: str = "Ideas", **fields) -> Note:
        fields.setdefault("content", "Some content")
        return NoteRepository(db_session).create(
            Note(id=None, title=title, owner_id=owner.id, **fields)
        )

    return _make_note


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    def _auth_headers(user: User) -> dict[str, str]:
        token = create_access_token(
            data={"sub": user.email, "role": user.role, "pwd_sig": password_signature(user)}
        )
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


class FakeClock:
    """Deterministic clock handed to the ledger to simulate the passage of time."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta) -> datetime:
        self.current = self.current + timedelta(**delta)
        return self.current


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
