"""Tests for the append-only activity ledger store."""

from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from worklog.domain.entities import ActivityFilter, ActivityRecordInput, ActivityType
from worklog.domain.exceptions import ValidationError
from worklog.infrastructure.repositories import ActivityRepository


def _profile_update(actor_id: int, description: str = "Profile updated") -> ActivityRecordInput:
    return ActivityRecordInput(
        type=ActivityType.PROFILE_UPDATED,
        actor_id=actor_id,
        target_user_id=actor_id,
        description=description,
        metadata={"changes": ["name"]},
    )


def test_append_then_get_returns_the_stored_values(db_session, make_user, clock):
    user = make_user()
    repository = ActivityRepository(db_session, clock=clock)

    created = repository.append(_profile_update(user.id))
    fetched = repository.get(created.id)

    assert fetched == created
    assert fetched.type == "profile_updated"
    assert fetched.actor_id == user.id
    assert fetched.target_user_id == user.id
    assert fetched.description == "Profile updated"
    assert dict(fetched.metadata) == {"changes": ["name"]}
    assert fetched.created_at == clock()


def test_previously_returned_records_never_change(db_session, make_user, clock):
    user = make_user()
    repository = ActivityRepository(db_session, clock=clock)
    first = repository.append(_profile_update(user.id, "First"))

    clock.advance(minutes=5)
    repository.append_batch([_profile_update(user.id, "Second"), _profile_update(user.id, "Third")])

    assert repository.get(first.id) == first
    assert not hasattr(repository, "update")
    assert not hasattr(repository, "delete")


def test_batch_shares_one_timestamp_and_gets_increasing_ids(db_session, make_user, clock):
    user = make_user()
    records = ActivityRepository(db_session, clock=clock).append_batch(
        [_profile_update(user.id, f"Change {index}") for index in range(3)]
    )

    assert len({record.created_at for record in records}) == 1
    assert [record.id for record in records] == sorted(record.id for record in records)


def test_invalid_input_rejects_the_whole_batch_before_writing(db_session, make_user, clock):
    user = make_user()
    repository = ActivityRepository(db_session, clock=clock)
    batch = [
        _profile_update(user.id, "Valid"),
        ActivityRecordInput(type="not_a_type", actor_id=user.id, description="Broken"),
        _profile_update(user.id, "Also valid"),
    ]

    with pytest.raises(ValidationError):
        repository.append_batch(batch)

    assert repository.count(ActivityFilter()) == 0


def test_storage_failure_rolls_back_the_whole_batch(db_session, make_user, clock):
    user = make_user()
    repository = ActivityRepository(db_session, clock=clock)
    batch = [
        _profile_update(user.id, "Valid"),
        # No such user: the foreign key on the actor fails at commit time.
        ActivityRecordInput(
            type=ActivityType.PASSWORD_CHANGED, actor_id=9999, description="Ghost"
        ),
    ]

    with pytest.raises(IntegrityError):
        repository.append_batch(batch)

    assert repository.count(ActivityFilter()) == 0


@pytest.mark.parametrize("description", ["", "   "])
def test_description_is_required(db_session, make_user, clock, description):
    user = make_user()

    with pytest.raises(ValidationError):
        ActivityRepository(db_session, clock=clock).append(
            _profile_update(user.id, description)
        )


def test_equal_timestamps_are_ordered_by_id(db_session, make_user, clock):
    user = make_user()
    repository = ActivityRepository(db_session, clock=clock)
    older = repository.append(_profile_update(user.id, "Older"))
    clock.advance(hours=1)
    batch = repository.append_batch(
        [_profile_update(user.id, f"Same time {index}") for index in range(3)]
    )

    records = repository.find_many(ActivityFilter(actor_id=user.id))

    assert repository.count(ActivityFilter(actor_id=user.id)) == 4
    assert [record.id for record in records] == [record.id for record in batch] + [older.id]

    ascending = repository.find_many(ActivityFilter(actor_id=user.id), sort_order="asc")
    assert [record.id for record in ascending] == [older.id] + [record.id for record in batch]


def test_sort_by_type(db_session, make_user, clock):
    user = make_user()
    repository = ActivityRepository(db_session, clock=clock)
    repository.append_batch(
        [
            _profile_update(user.id),
            ActivityRecordInput(
                type=ActivityType.AVATAR_CHANGED, actor_id=user.id, description="Avatar"
            ),
            ActivityRecordInput(
                type=ActivityType.PASSWORD_CHANGED, actor_id=user.id, description="Password"
            ),
        ]
    )

    records = repository.find_many(ActivityFilter(), sort_by="type", sort_order="asc")

    assert [record.type for record in records] == [
        "avatar_changed",
        "password_changed",
        "profile_updated",
    ]


@pytest.mark.parametrize(
    ("sort_by", "sort_order"),
    [("description", "desc"), ("createdAt", "sideways")],
)
def test_invalid_sort_is_rejected(db_session, sort_by, sort_order):
    with pytest.raises(ValidationError):
        ActivityRepository(db_session).find_many(
            ActivityFilter(), sort_by=sort_by, sort_order=sort_order
        )


def test_filters_combine_conjunctively(db_session, make_user, clock):
    alice = make_user("Alice")
    bob = make_user("Bob")
    repository = ActivityRepository(db_session, clock=clock)
    repository.append(_profile_update(alice.id, "Alice early"))
    clock.advance(days=2)
    repository.append(
        ActivityRecordInput(
            type=ActivityType.AVATAR_CHANGED,
            actor_id=alice.id,
            target_user_id=bob.id,
            description="Alice touched Bob",
        )
    )
    clock.advance(days=2)
    repository.append(_profile_update(bob.id, "Bob late"))

    related = repository.find_many(ActivityFilter(related_user_id=bob.id))
    assert len(related) == 2
    assert {record.description for record in related} == {"Alice touched Bob", "Bob late"}

    typed = repository.find_many(
        ActivityFilter(actor_id=alice.id, types=[ActivityType.AVATAR_CHANGED])
    )
    assert [record.description for record in typed] == ["Alice touched Bob"]

    windowed = repository.find_many(
        ActivityFilter(
            created_start=clock.current - timedelta(days=3),
            created_end=clock.current,
        )
    )
    assert {record.description for record in windowed} == {"Alice touched Bob", "Bob late"}


def test_find_page_clamps_past_the_last_page(db_session, make_user, clock):
    user = make_user()
    repository = ActivityRepository(db_session, clock=clock)
    for index in range(5):
        repository.append(_profile_update(user.id, f"Update {index}"))
        clock.advance(minutes=1)

    records, total, page = repository.find_page(ActivityFilter(), page=9, limit=2)

    assert total == 5
    assert page == 3
    assert [record.description for record in records] == ["Update 0"]
