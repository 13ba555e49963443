"""Use cases for managing notes."""

from .manage_notes import (
    UPDATABLE_FIELDS,
    create_note,
    delete_note,
    get_note,
    get_owned_note,
    set_pin,
    toggle_pin,
    update_note,
)

__all__ = [
    "UPDATABLE_FIELDS",
    "create_note",
    "delete_note",
    "get_note",
    "get_owned_note",
    "set_pin",
    "toggle_pin",
    "update_note",
]
