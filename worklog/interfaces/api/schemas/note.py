"""Schemas for notes."""

from datetime import datetime

from pydantic import ConfigDict, Field

from .common import CamelModel


class NoteCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = ""
    category: str = "general"
    is_pinned: bool = False


class NoteUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = None
    category: str | None = None
    is_pinned: bool = False

    model_config = ConfigDict(extra="forbid")


class NoteRead(CamelModel):
    id: int
    title: str
    content: str
    category: str
    is_pinned: bool
    owner_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["NoteCreate", "NoteRead", "NoteUpdate"]
