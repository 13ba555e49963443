"""Tests for account workflows and the activities they write."""

from __future__ import annotations

import pytest

from worklog.application.use_cases.activities import get_user_activities
from worklog.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    change_avatar,
    change_password,
    record_login,
    register_user,
    update_preferences,
    update_profile,
)
from worklog.domain.exceptions import Conflict, ValidationError


def _types(views):
    return [view.record.type for view in views]


def test_register_rejects_duplicate_email(db_session):
    register_user(db_session, name="Ana", email="ana@example.com", password="Secret123")

    with pytest.raises(Conflict):
        register_user(db_session, name="Ana 2", email="ana@example.com", password="Secret123")


def test_authenticate_and_record_login(db_session):
    user = register_user(db_session, name="Ana", email="ana@example.com", password="Secret123")

    _, status = authenticate_user(db_session, "ana@example.com", "wrong")
    assert status is AuthenticationStatus.INVALID_CREDENTIALS

    authenticated, status = authenticate_user(db_session, "ana@example.com", "Secret123")
    assert status is AuthenticationStatus.SUCCESS
    assert authenticated.id == user.id

    record_login(db_session, user.id)
    record_login(db_session, user.id)

    latest, first = get_user_activities(db_session, user.id)
    assert latest.record.description == "User logged in"
    assert first.record.metadata == {"previousLogin": None}
    assert latest.record.metadata["previousLogin"] is not None


def test_profile_changes_are_logged(db_session, make_user):
    user = make_user()

    update_profile(db_session, user.id, {"name": "Renamed"})
    change_avatar(db_session, user.id, "https://cdn.example.com/a.png")
    updated = update_preferences(db_session, user.id, {"theme": "dark"})

    assert updated.preferences == {"theme": "dark"}
    views = get_user_activities(db_session, user.id)
    assert set(_types(views)) == {"profile_updated", "avatar_changed", "preferences_updated"}
    assert all(view.record.target_user_id == user.id for view in views)


def test_profile_email_must_stay_unique(db_session, make_user):
    first = make_user(email="first@example.com")
    make_user(email="second@example.com")

    with pytest.raises(Conflict):
        update_profile(db_session, first.id, {"email": "second@example.com"})


def test_change_password_checks_the_current_password(db_session, make_user):
    user = make_user()

    with pytest.raises(ValidationError):
        change_password(db_session, user.id, current_password="nope", new_password="Another123")

    change_password(db_session, user.id, current_password="Secret123", new_password="Another123")

    assert _types(get_user_activities(db_session, user.id)) == ["password_changed"]
    _, status = authenticate_user(db_session, user.email, "Another123")
    assert status is AuthenticationStatus.SUCCESS
