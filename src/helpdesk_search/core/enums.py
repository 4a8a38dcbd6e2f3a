"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class EntityKind(str, Enum):
    """Searchable entity collections.

    Values are the lower-case names accepted on the command line.
    """

    ORGANIZATION = "org"
    USER = "user"
    TICKET = "ticket"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    EntityKind.ORGANIZATION: "Organization",
    EntityKind.USER: "User",
    EntityKind.TICKET: "Ticket",
}


class FieldKind(str, Enum):
    """Shape of a field value; decides how a search value is compared."""

    STRING = "string"
    STRING_LIST = "[]string"
    BOOL = "bool"
    INT = "int"


__all__ = ["EntityKind", "FieldKind"]
