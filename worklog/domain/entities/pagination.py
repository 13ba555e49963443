"""Containers for paginated results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def clamp_page(requested: int, total: int, limit: int) -> int:
    """Clamp ``requested`` to the last available page, never below 1."""

    return min(requested, total_pages(total, limit)) or 1


@dataclass
class Page(Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int
    pages: int


@dataclass
class NotificationPage(Page[T]):
    unread_count: int = field(default=0)


__all__ = ["NotificationPage", "Page", "clamp_page", "total_pages"]
