"""SQLAlchemy model for the task table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from worklog.infrastructure.database import Base
from worklog.utils import now_in_app_naive_datetime


class TaskModel(Base):
    """Database representation of a task."""

    __tablename__ = "task"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="todo")
    due_date = Column(DateTime, nullable=True)
    is_archived = Column(Boolean, nullable=False, default=False)
    owner_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    assignee_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    comments = relationship(
        "CommentModel",
        back_populates="task",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["TaskModel"]
