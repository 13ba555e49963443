"""Tests for reference validation and the activity write paths."""

from __future__ import annotations

import logging

import pytest

from worklog.application.use_cases.activities import (
    EntityReferenceResolver,
    best_effort_append,
    record_activities,
    record_activity,
)
from worklog.domain.entities import ActivityFilter, ActivityRecordInput, ActivityType
from worklog.domain.exceptions import ReferenceNotFound, ValidationError
from worklog.infrastructure.database import SessionLocal
from worklog.infrastructure.repositories import ActivityRepository


def _ledger_size(session) -> int:
    return ActivityRepository(session).count(ActivityFilter())


def test_task_activity_requires_a_task_reference(db_session, make_user):
    user = make_user()
    record = ActivityRecordInput(
        type=ActivityType.TASK_UPDATED, actor_id=user.id, description="Updated"
    )

    with pytest.raises(ValidationError):
        EntityReferenceResolver(db_session).ensure_references(record)


def test_comment_and_due_date_activities_are_task_activities(db_session, make_user):
    user = make_user()
    for activity_type in (ActivityType.COMMENT_ADDED, ActivityType.DUE_DATE_CHANGED):
        with pytest.raises(ValidationError):
            record_activity(
                db_session,
                ActivityRecordInput(type=activity_type, actor_id=user.id, description="x"),
            )
    assert _ledger_size(db_session) == 0


def test_missing_task_is_reported_with_its_kind_and_id(db_session, make_user):
    user = make_user()
    record = ActivityRecordInput(
        type=ActivityType.TASK_CREATED, actor_id=user.id, task_id=42, description="Created"
    )

    with pytest.raises(ReferenceNotFound) as excinfo:
        record_activity(db_session, record)

    assert excinfo.value.entity_kind == "task"
    assert excinfo.value.entity_id == 42
    assert excinfo.value.message == "Task 42 not found"
    assert _ledger_size(db_session) == 0


def test_missing_note_is_rejected(db_session, make_user):
    user = make_user()
    record = ActivityRecordInput(
        type=ActivityType.NOTE_PINNED, actor_id=user.id, note_id=7, description="Pinned"
    )

    with pytest.raises(ReferenceNotFound):
        record_activity(db_session, record)


def test_missing_target_user_is_rejected(db_session, make_user, make_task):
    user = make_user()
    task = make_task(user)
    record = ActivityRecordInput(
        type=ActivityType.TASK_ASSIGNED,
        actor_id=user.id,
        task_id=task.id,
        target_user_id=999,
        description="Assigned",
    )

    with pytest.raises(ReferenceNotFound) as excinfo:
        record_activity(db_session, record)

    assert excinfo.value.entity_kind == "user"


def test_account_activity_targets_the_actor_by_default(db_session, make_user):
    user = make_user()

    stored = record_activity(
        db_session,
        ActivityRecordInput(
            type=ActivityType.AVATAR_CHANGED, actor_id=user.id, description="New avatar"
        ),
    )

    assert stored.target_user_id == user.id


@pytest.mark.parametrize(
    ("activity_type", "references"),
    [
        (ActivityType.PROFILE_UPDATED, {"task_id": "task"}),
        (ActivityType.PROFILE_UPDATED, {"note_id": "note"}),
        (ActivityType.TASK_UPDATED, {"task_id": "task", "note_id": "note"}),
        (ActivityType.NOTE_UPDATED, {"note_id": "note", "task_id": "task"}),
    ],
)
def test_references_outside_the_event_category_are_rejected(
    db_session, make_user, make_task, make_note, activity_type, references
):
    user = make_user()
    entities = {"task": make_task(user), "note": make_note(user)}
    record = ActivityRecordInput(
        type=activity_type,
        actor_id=user.id,
        description="Mixed references",
        **{field: entities[kind].id for field, kind in references.items()},
    )

    with pytest.raises(ValidationError):
        record_activity(db_session, record)
    assert _ledger_size(db_session) == 0


def test_unknown_type_is_a_validation_error(db_session, make_user):
    user = make_user()

    with pytest.raises(ValidationError):
        record_activity(
            db_session,
            ActivityRecordInput(type="task_exploded", actor_id=user.id, description="Boom"),
        )


def test_one_bad_reference_rejects_the_batch(db_session, make_user, make_task):
    user = make_user()
    task = make_task(user)
    batch = [
        ActivityRecordInput(
            type=ActivityType.TASK_UPDATED, actor_id=user.id, task_id=task.id, description="ok"
        ),
        ActivityRecordInput(
            type=ActivityType.TASK_STATUS_CHANGED,
            actor_id=user.id,
            task_id=task.id + 100,
            description="bad",
        ),
    ]

    with pytest.raises(ReferenceNotFound):
        record_activities(db_session, batch)

    assert _ledger_size(db_session) == 0


def test_best_effort_append_writes_in_its_own_session(db_session, make_user):
    user = make_user()

    stored = best_effort_append(
        SessionLocal,
        ActivityRecordInput(
            type=ActivityType.PROFILE_UPDATED, actor_id=user.id, description="Account created"
        ),
    )

    assert stored is not None
    assert _ledger_size(db_session) == 1


def test_best_effort_append_swallows_and_logs_failures(db_session, caplog):
    record = ActivityRecordInput(
        type=ActivityType.PROFILE_UPDATED,
        actor_id=1,
        target_user_id=12345,
        description="Account created",
    )

    with caplog.at_level(logging.ERROR):
        assert best_effort_append(SessionLocal, record) is None

    assert "Dropped profile_updated activity" in caplog.text
    assert _ledger_size(db_session) == 0


def test_best_effort_append_survives_a_broken_session_factory(caplog):
    def _broken_factory():
        raise RuntimeError("database unavailable")

    record = ActivityRecordInput(
        type=ActivityType.PROFILE_UPDATED, actor_id=1, description="Account created"
    )

    with caplog.at_level(logging.ERROR):
        assert best_effort_append(_broken_factory, record) is None

    assert "Could not open a session" in caplog.text
