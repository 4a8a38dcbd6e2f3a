"""Per-kind field accessor tables.

Queries address fields by name at runtime. Each entity kind gets a table
built once at import time from its schema: field name -> (getter, kind tag).
The matcher reads fields only through these tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Dict, List, Tuple, Union

from ..enums import EntityKind, FieldKind
from ..exceptions import FieldNotFound, UnknownEntityKind
from ..models import Entity, kind_of
from ..schemas import get_schema


@dataclass(frozen=True)
class FieldAccessor:
    name: str
    kind: FieldKind
    getter: Callable[[Any], Any]

    def get(self, entity: Entity) -> Any:
        return self.getter(entity)


def _build_table(kind: EntityKind) -> Dict[str, FieldAccessor]:
    return {
        f.name: FieldAccessor(name=f.name, kind=f.kind, getter=attrgetter(f.attr))
        for f in get_schema(kind)
    }


FIELD_TABLES: Dict[EntityKind, Dict[str, FieldAccessor]] = {
    kind: _build_table(kind) for kind in EntityKind
}


def resolve_entity_kind(kind: Union[EntityKind, str]) -> EntityKind:
    """Map a query's entity kind ("org", "user", "ticket") to an EntityKind.

    Matching is exact; callers lower-case user input before getting here.

    Raises:
        UnknownEntityKind: If ``kind`` names no collection.
    """
    if isinstance(kind, EntityKind):
        return kind
    try:
        return EntityKind(kind)
    except ValueError:
        raise UnknownEntityKind(str(kind)) from None


def get_accessor(kind: Union[EntityKind, str], field_name: str) -> FieldAccessor:
    """Return the accessor registered for ``field_name`` on ``kind``.

    Field names are case-sensitive.

    Raises:
        UnknownEntityKind: If ``kind`` names no collection.
        FieldNotFound: If no such field is registered for ``kind``.
    """
    entity_kind = resolve_entity_kind(kind)
    try:
        return FIELD_TABLES[entity_kind][field_name]
    except KeyError:
        raise FieldNotFound(entity_kind.label, field_name) from None


def get_field(entity: Entity, field_name: str) -> Tuple[Any, FieldKind]:
    """Return ``(value, kind tag)`` for a named field of ``entity``.

    Examples:
        >>> get_field(Organization(id=101), "ID")
        (101, <FieldKind.INT: 'int'>)
    """
    accessor = get_accessor(kind_of(entity), field_name)
    return accessor.get(entity), accessor.kind


def list_fields(kind: EntityKind) -> List[str]:
    """Return the searchable field names of ``kind`` in declaration order."""
    return list(FIELD_TABLES[kind])


__all__ = [
    "FieldAccessor",
    "FIELD_TABLES",
    "resolve_entity_kind",
    "get_accessor",
    "get_field",
    "list_fields",
]
