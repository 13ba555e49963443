"""Domain entity representing a note."""

from dataclasses import dataclass
from datetime import datetime

NOTE_CATEGORIES = ("general", "personal", "work", "important", "idea")


@dataclass
class Note:
    """Free-form text kept by a user."""

    id: int | None
    title: str
    content: str
    owner_id: int
    category: str = "general"
    is_pinned: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Note", "NOTE_CATEGORIES"]
