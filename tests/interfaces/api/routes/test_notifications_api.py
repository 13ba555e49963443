"""Tests for the notification feed endpoints."""

from __future__ import annotations

from worklog.application.use_cases.tasks import assign_task, create_task


def test_feed_renders_notifications_for_the_target(client, db_session, make_user, auth_headers):
    alice = make_user("Alice")
    bob = make_user("Bob")
    task = create_task(db_session, owner_id=alice.id, title="Deploy")
    assign_task(db_session, task.id, actor_id=alice.id, assignee_id=bob.id)

    response = client.get("/notifications", headers=auth_headers(bob))

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    data = body["data"]
    assert data["total"] == 1
    assert data["unreadCount"] == 1
    (item,) = data["items"]
    assert item["type"] == "task_assigned"
    assert item["message"] == 'Alice assigned you to the task "Deploy"'
    assert item["isRead"] is False
    assert item["relatedId"] == task.id
    assert item["relatedKind"] == "task"


def test_unread_count(client, db_session, make_user, auth_headers):
    user = make_user()
    create_task(db_session, owner_id=user.id, title="A")
    create_task(db_session, owner_id=user.id, title="B")

    response = client.get("/notifications/unread-count", headers=auth_headers(user))

    assert response.json() == {"status": "success", "message": None, "data": {"count": 2}}


def test_mutations_succeed_without_changing_the_feed(client, db_session, make_user, auth_headers):
    user = make_user()
    create_task(db_session, owner_id=user.id, title="A")
    headers = auth_headers(user)
    before = client.get("/notifications", params={"unreadOnly": True}, headers=headers).json()

    read = client.patch("/notifications/1/read", headers=headers)
    read_all = client.patch("/notifications/mark-all-read", headers=headers)
    deleted = client.delete("/notifications/1", headers=headers)

    assert read.status_code == 200 and read.json()["status"] == "success"
    assert read_all.json()["data"] == {"count": 1}
    assert deleted.status_code == 200
    after = client.get("/notifications", params={"unreadOnly": True}, headers=headers).json()
    assert after == before


def test_invalid_limit_is_400(client, make_user, auth_headers):
    user = make_user()

    response = client.get("/notifications", params={"limit": 0}, headers=auth_headers(user))

    assert response.status_code == 400
    assert response.json()["status"] == "error"
