"""Exception types raised by the search core and the data loaders.

Query errors are local to a single query: callers report them and carry on
with the next one. Load errors are fatal because every query depends on the
loaded dataset.

Usage:
    raise FieldNotFound(EntityKind.USER, "Bogus")
"""

from __future__ import annotations

from typing import Optional


class SearchError(ValueError):
    """Base class for errors that abort a single query."""


class UnknownEntityKind(SearchError):
    """Raised when a query names a collection that does not exist."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Invalid search type: {kind}")


class FieldNotFound(SearchError):
    """Raised when a field name is not registered for an entity kind."""

    def __init__(self, entity_label: str, field_name: str) -> None:
        self.entity_label = entity_label
        self.field_name = field_name
        super().__init__(f"No such field: {field_name} in {entity_label}")


class InvalidBooleanLiteral(SearchError):
    """Raised when a Bool field is searched with something other than true/false."""

    def __init__(self, entity_label: str, field_name: str, value: str) -> None:
        self.entity_label = entity_label
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Invalid search value for boolean field: {entity_label}.{field_name} "
            f"is a bool field and search value ({value}) must be boolean (true/false)"
        )


class InvalidIntegerLiteral(SearchError):
    """Raised when an Int field comparison cannot parse one of its operands."""

    def __init__(self, entity_label: str, field_name: str, value: object) -> None:
        self.entity_label = entity_label
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Invalid search value for integer field: {entity_label}.{field_name} "
            f"is an int field and value ({value}) must be a base-10 integer"
        )


class DataLoadError(ValueError):
    """Raised when an entity collection cannot be read or decoded."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        index: Optional[int] = None,
        key: Optional[str] = None,
    ) -> None:
        self.path = path
        self.index = index
        self.key = key
        location = []
        if path is not None:
            location.append(str(path))
        if index is not None:
            location.append(f"record {index}")
        if key is not None:
            location.append(f"key '{key}'")
        prefix = f"{', '.join(location)}: " if location else ""
        super().__init__(f"{prefix}{message}")


__all__ = [
    "SearchError",
    "UnknownEntityKind",
    "FieldNotFound",
    "InvalidBooleanLiteral",
    "InvalidIntegerLiteral",
    "DataLoadError",
]
