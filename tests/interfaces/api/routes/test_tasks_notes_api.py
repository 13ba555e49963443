"""Tests for the task and note endpoints and the activities they produce."""

from __future__ import annotations


def _history(client, kind, entity_id, headers):
    response = client.get(f"/activities/{kind}/{entity_id}/history", headers=headers)
    return [item["type"] for item in response.json()["data"]]


def test_task_lifecycle(client, make_user, auth_headers):
    owner = make_user()
    headers = auth_headers(owner)

    created = client.post(
        "/tasks", json={"title": "Write docs", "dueDate": "2024-05-01T10:00:00Z"}, headers=headers
    )
    assert created.status_code == 201
    task_id = created.json()["data"]["id"]

    updated = client.patch(f"/tasks/{task_id}", json={"status": "done"}, headers=headers)
    assert updated.json()["data"]["status"] == "done"

    comment = client.post(
        f"/tasks/{task_id}/comments", json={"content": "Shipped"}, headers=headers
    )
    assert comment.status_code == 201

    assert _history(client, "task", task_id, headers) == [
        "comment_added",
        "task_updated",
        "task_status_changed",
        "task_completed",
        "task_created",
    ]

    deleted = client.delete(f"/tasks/{task_id}", headers=headers)
    assert deleted.json() == {"status": "success", "message": "Task deleted", "data": None}
    assert client.get(f"/tasks/{task_id}", headers=headers).status_code == 404


def test_task_update_rejects_unknown_fields(client, make_user, auth_headers):
    owner = make_user()
    headers = auth_headers(owner)
    task_id = client.post("/tasks", json={"title": "Strict"}, headers=headers).json()["data"]["id"]

    response = client.patch(f"/tasks/{task_id}", json={"ownerId": 5}, headers=headers)

    assert response.status_code == 400


def test_non_owner_gets_403(client, make_user, auth_headers):
    owner = make_user()
    other = make_user()
    task_id = client.post(
        "/tasks", json={"title": "Mine"}, headers=auth_headers(owner)
    ).json()["data"]["id"]

    response = client.patch(
        f"/tasks/{task_id}", json={"title": "Yours"}, headers=auth_headers(other)
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Only the task owner can modify this task"


def test_note_lifecycle(client, make_user, auth_headers):
    owner = make_user()
    headers = auth_headers(owner)

    created = client.post(
        "/notes", json={"title": "Journal", "content": "Day 1", "category": "personal"}, headers=headers
    )
    assert created.status_code == 201
    note_id = created.json()["data"]["id"]

    pinned = client.patch(f"/notes/{note_id}/pin", headers=headers)
    assert pinned.json()["data"]["isPinned"] is True
    assert pinned.json()["message"] == "Note pinned"

    client.patch(f"/notes/{note_id}", json={"content": "Day 2"}, headers=headers)

    assert _history(client, "note", note_id, headers) == [
        "note_updated",
        "note_pinned",
        "note_created",
    ]

    client.delete(f"/notes/{note_id}", headers=headers)
    listing = client.get("/activities", params={"note": note_id}, headers=headers).json()
    assert listing["data"]["items"][0]["type"] == "note_deleted"
    assert listing["data"]["items"][0]["note"] is None


def test_profile_endpoints_write_account_activities(client, make_user, auth_headers):
    user = make_user()
    headers = auth_headers(user)

    client.patch("/users/me", json={"name": "New Name"}, headers=headers)
    client.put("/users/me/avatar", json={"avatar": "https://cdn.example.com/me.png"}, headers=headers)
    preferences = client.put(
        "/users/me/preferences", json={"preferences": {"language": "es"}}, headers=headers
    )

    assert preferences.json()["data"]["preferences"] == {"language": "es"}
    recent = client.get("/activities/user/recent", headers=headers).json()["data"]
    assert {item["type"] for item in recent} == {
        "profile_updated",
        "avatar_changed",
        "preferences_updated",
    }
