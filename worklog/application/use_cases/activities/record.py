"""Write paths into the activity ledger."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from worklog.domain.entities import ActivityRecord, ActivityRecordInput
from worklog.infrastructure.repositories import ActivityRepository

from .references import EntityReferenceResolver

logger = logging.getLogger(__name__)


def _ledger(session: Session, clock: Callable[[], datetime] | None) -> ActivityRepository:
    if clock is None:
        return ActivityRepository(session)
    return ActivityRepository(session, clock=clock)


def record_activity(
    session: Session,
    record: ActivityRecordInput,
    *,
    clock: Callable[[], datetime] | None = None,
) -> ActivityRecord:
    """Validate references and append one activity; errors propagate."""

    return record_activities(session, [record], clock=clock)[0]


def record_activities(
    session: Session,
    records: Sequence[ActivityRecordInput],
    *,
    clock: Callable[[], datetime] | None = None,
) -> list[ActivityRecord]:
    """Validate every input, then append them all or none."""

    resolver = EntityReferenceResolver(session)
    resolved = [resolver.ensure_references(record) for record in records]
    return _ledger(session, clock).append_batch(resolved)


def best_effort_append(
    session_factory: Callable[[], Session],
    record: ActivityRecordInput,
) -> ActivityRecord | None:
    """Append ``record`` in its own session, never raising.

    Used for activities that document an operation which has already
    succeeded; a failure here is logged and dropped.
    """

    try:
        session = session_factory()
    except Exception:
        logger.exception("Could not open a session to record %s activity", record.type_value)
        return None

    try:
        return record_activity(session, record)
    except Exception:
        logger.exception(
            "Dropped %s activity for user %s", record.type_value, record.actor_id
        )
        return None
    finally:
        session.close()


__all__ = ["best_effort_append", "record_activities", "record_activity"]
