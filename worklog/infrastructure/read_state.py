"""Per-user notification read state.

There is no read-state table yet. Notifications are treated as read or
unread purely from their age, and the store below accepts every mutation
without recording it. A persistent implementation only needs to satisfy
:class:`ReadStateStore` to replace it.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class ReadStateStore(Protocol):
    def mark_read(self, user_id: int, activity_id: int) -> bool: ...

    def mark_all_read(self, user_id: int) -> bool: ...

    def dismiss(self, user_id: int, activity_id: int) -> bool: ...


class NoOpReadStateStore:
    """Report success for every mutation and keep no state."""

    def mark_read(self, user_id: int, activity_id: int) -> bool:
        logger.debug("mark_read ignored for user %s activity %s", user_id, activity_id)
        return True

    def mark_all_read(self, user_id: int) -> bool:
        logger.debug("mark_all_read ignored for user %s", user_id)
        return True

    def dismiss(self, user_id: int, activity_id: int) -> bool:
        logger.debug("dismiss ignored for user %s activity %s", user_id, activity_id)
        return True


__all__ = ["NoOpReadStateStore", "ReadStateStore"]
