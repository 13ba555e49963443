"""Error taxonomy shared by the use cases and the HTTP layer."""

from __future__ import annotations


class WorklogError(Exception):
    """Base class for errors that map to a client-facing HTTP status."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(WorklogError):
    status_code = 400
    default_message = "Invalid request"


class NotFound(WorklogError):
    status_code = 404
    default_message = "Resource not found"


class ReferenceNotFound(NotFound):
    """A write referenced a task, note or user that does not exist."""

    def __init__(self, entity_kind: str, entity_id: int) -> None:
        super().__init__(f"{entity_kind.capitalize()} {entity_id} not found")
        self.entity_kind = entity_kind
        self.entity_id = entity_id


class PermissionDenied(WorklogError):
    status_code = 403
    default_message = "Not allowed"


class Conflict(WorklogError):
    status_code = 409
    default_message = "Conflict with an existing resource"


__all__ = [
    "Conflict",
    "NotFound",
    "PermissionDenied",
    "ReferenceNotFound",
    "ValidationError",
    "WorklogError",
]
