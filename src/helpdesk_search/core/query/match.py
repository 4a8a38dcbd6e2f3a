"""Field/value predicate evaluation.

A predicate compares one named field of an entity with a raw search string.
How the comparison works depends on the field's kind tag:

- String: exact, case-sensitive equality.
- StringList: the list is rendered as its elements joined by single spaces and
  split back on single spaces; the predicate holds if the search value equals
  any one token. An element that itself contains a space therefore can never
  be matched as a whole.
- Bool: the search value must be "true" or "false" in any case.
- Int: both the stored value and the search value must parse as base-10
  integers.

An empty search value gets no special treatment: it matches an empty string,
an empty list, and is rejected for Bool and Int fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Union

from ..enums import EntityKind, FieldKind
from ..exceptions import InvalidBooleanLiteral, InvalidIntegerLiteral
from ..models import Entity, kind_of
from .fields import FieldAccessor, get_accessor, resolve_entity_kind

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def parse_bool_literal(value: str, entity_label: str, field_name: str) -> bool:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise InvalidBooleanLiteral(entity_label, field_name, value)


def parse_int_literal(value: Any, entity_label: str, field_name: str) -> int:
    """Parse a base-10 integer: optional sign followed by ASCII digits.

    Surrounding whitespace, underscores and non-ASCII digits are rejected.
    """
    if isinstance(value, bool):
        raise InvalidIntegerLiteral(entity_label, field_name, value)
    text = value if isinstance(value, str) else str(value)
    if not _INT_LITERAL.fullmatch(text):
        raise InvalidIntegerLiteral(entity_label, field_name, value)
    return int(text)


def list_tokens(values: Iterable[str]) -> List[str]:
    """Split a list field into the tokens a search value is compared against.

    Examples:
        >>> list_tokens(["Fulton", "West"])
        ['Fulton', 'West']
        >>> list_tokens(["New York"])
        ['New', 'York']
        >>> list_tokens([])
        ['']
    """
    return " ".join(values).split(" ")


@dataclass(frozen=True)
class Predicate:
    """A compiled ``field == value`` test for one entity kind.

    The search literal is parsed once at build time; the stored value is
    parsed per entity.
    """

    entity_kind: EntityKind
    accessor: FieldAccessor
    search_value: str
    expected: Any

    def __call__(self, entity: Entity) -> bool:
        value = self.accessor.get(entity)
        kind = self.accessor.kind
        if kind == FieldKind.STRING:
            return value == self.expected
        if kind == FieldKind.STRING_LIST:
            return self.expected in list_tokens(value)
        if kind == FieldKind.BOOL:
            return value == self.expected
        stored = parse_int_literal(value, self.entity_kind.label, self.accessor.name)
        return stored == self.expected


def build_predicate(
    kind: Union[EntityKind, str], field_name: str, search_value: str
) -> Predicate:
    """Compile a predicate for ``field_name == search_value`` on ``kind``.

    Raises:
        UnknownEntityKind: If ``kind`` names no collection.
        FieldNotFound: If ``field_name`` is not a field of ``kind``.
        InvalidBooleanLiteral: If the field is Bool and the value is not true/false.
        InvalidIntegerLiteral: If the field is Int and the value is not an integer.
    """
    kind = resolve_entity_kind(kind)
    accessor = get_accessor(kind, field_name)
    if accessor.kind == FieldKind.BOOL:
        expected: Any = parse_bool_literal(search_value, kind.label, field_name)
    elif accessor.kind == FieldKind.INT:
        expected = parse_int_literal(search_value, kind.label, field_name)
    else:
        expected = search_value
    return Predicate(
        entity_kind=kind, accessor=accessor, search_value=search_value, expected=expected
    )


def matches(entity: Entity, field_name: str, search_value: str) -> bool:
    """Return True if ``entity``'s field ``field_name`` matches ``search_value``."""
    return build_predicate(kind_of(entity), field_name, search_value)(entity)


__all__ = [
    "parse_bool_literal",
    "parse_int_literal",
    "list_tokens",
    "Predicate",
    "build_predicate",
    "matches",
]
