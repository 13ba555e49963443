"""Tests for registration and token issuance."""

from __future__ import annotations

from unittest.mock import patch

from worklog.application.use_cases.activities import get_user_activities


def test_register_logs_account_creation_in_the_background(client, db_session):
    response = client.post(
        "/auth/register",
        json={"name": "Ana", "email": "ana@example.com", "password": "Secret123"},
    )

    assert response.status_code == 201
    user = response.json()["data"]
    assert user["email"] == "ana@example.com"
    assert "password" not in user

    (view,) = get_user_activities(db_session, user["id"])
    assert view.record.type == "profile_updated"
    assert view.record.description == "User account created"
    assert view.record.target_user_id == user["id"]


def test_registration_succeeds_when_the_activity_write_fails(client, db_session):
    with patch(
        "worklog.application.use_cases.activities.record.record_activity",
        side_effect=RuntimeError("ledger offline"),
    ):
        response = client.post(
            "/auth/register",
            json={"name": "Ana", "email": "ana@example.com", "password": "Secret123"},
        )

    assert response.status_code == 201
    assert get_user_activities(db_session, response.json()["data"]["id"]) == []


def test_duplicate_registration_is_409(client, make_user):
    make_user(email="taken@example.com")

    response = client.post(
        "/auth/register",
        json={"name": "Copy", "email": "taken@example.com", "password": "Secret123"},
    )

    assert response.status_code == 409
    assert response.json() == {"status": "error", "message": "Email is already in use"}


def test_invalid_registration_payload_is_400(client):
    response = client.post("/auth/register", json={"name": "", "email": "nope", "password": "x"})

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "Request validation failed"
    assert body["data"]["errors"]


def test_login_issues_a_token_and_logs_the_login(client, db_session, make_user):
    user = make_user(email="login@example.com")

    response = client.post(
        "/auth/token", data={"username": "login@example.com", "password": "Secret123"}
    )

    assert response.status_code == 200
    token = response.json()["access_token"]
    me = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["data"]["id"] == user.id
    assert me.json()["data"]["lastLogin"] is not None

    (view,) = get_user_activities(db_session, user.id)
    assert view.record.description == "User logged in"


def test_login_with_wrong_password_is_401(client, make_user):
    make_user(email="login@example.com")

    response = client.post(
        "/auth/token", data={"username": "login@example.com", "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json()["status"] == "error"


def test_password_change_revokes_existing_tokens(client, make_user, auth_headers):
    user = make_user()
    headers = auth_headers(user)

    response = client.put(
        "/users/me/password",
        json={"currentPassword": "Secret123", "newPassword": "Changed123"},
        headers=headers,
    )

    assert response.status_code == 200
    assert client.get("/users/me", headers=headers).status_code == 401
