"""SQLAlchemy model for the note table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from worklog.infrastructure.database import Base
from worklog.utils import now_in_app_naive_datetime


class NoteModel(Base):
    """Database representation of a note."""

    __tablename__ = "note"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(20), nullable=False, default="general")
    is_pinned = Column(Boolean, nullable=False, default=False)
    owner_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["NoteModel"]
