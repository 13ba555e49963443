"""SQLAlchemy model for the append-only activity ledger."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from worklog.infrastructure.database import Base

_activity_json_type = JSONB().with_variant(JSON(), "sqlite")


class ActivityModel(Base):
    """Database representation of an activity record.

    ``task_id``, ``note_id`` and ``target_user_id`` carry no foreign key
    constraint: rows outlive the entities they mention.
    """

    __tablename__ = "activity"
    __table_args__ = (
        Index("ix_activity_task_created", "task_id", "created_at"),
        Index("ix_activity_note_created", "note_id", "created_at"),
        Index("ix_activity_actor_created", "actor_id", "created_at"),
        Index("ix_activity_target_created", "target_user_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(40), nullable=False, index=True)
    actor_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    target_user_id = Column(Integer, nullable=True)
    task_id = Column(Integer, nullable=True)
    note_id = Column(Integer, nullable=True)
    description = Column(Text, nullable=False)
    details = Column("metadata", _activity_json_type, nullable=False, default=dict)
    created_at = Column(DateTime, nullable=False, index=True)


__all__ = ["ActivityModel"]
