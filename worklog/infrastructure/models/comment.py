"""SQLAlchemy model for task comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from worklog.infrastructure.database import Base
from worklog.utils import now_in_app_naive_datetime


class CommentModel(Base):
    """Database representation of a comment left on a task."""

    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(
        Integer, ForeignKey("task.id", ondelete="CASCADE"), nullable=False, index=True
    )
    author_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    parent_id = Column(
        Integer, ForeignKey("comment.id", ondelete="CASCADE"), nullable=True
    )
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    task = relationship("TaskModel", back_populates="comments")


__all__ = ["CommentModel"]
