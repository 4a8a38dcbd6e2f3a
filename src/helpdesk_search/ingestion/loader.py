"""Load organizations, users and tickets from JSON data files.

Each file holds a JSON array of objects keyed as in ``core.schemas``. Missing
keys and ``null`` values fall back to the zero value of the field's shape
(``""``, ``()``, ``False``, ``0``); unknown keys are ignored. Anything that
does not fit the schema aborts the load with a DataLoadError naming the file,
record and key, since no query can be trusted on a partial dataset.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Type, TypeVar, Union

from helpdesk_search.core.enums import FieldKind
from helpdesk_search.core.exceptions import DataLoadError
from helpdesk_search.core.models import EntityStore, Organization, Ticket, User
from helpdesk_search.core.schemas import (
    FieldDef,
    ORGANIZATION_FIELDS,
    TICKET_FIELDS,
    USER_FIELDS,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
PathLike = Union[str, Path]

_ZERO_VALUES: Dict[FieldKind, Any] = {
    FieldKind.STRING: "",
    FieldKind.STRING_LIST: (),
    FieldKind.BOOL: False,
    FieldKind.INT: 0,
}


def _coerce(value: Any, field: FieldDef, path: Path, index: int) -> Any:
    if value is None:
        return _ZERO_VALUES[field.kind]

    def fail(expected: str) -> DataLoadError:
        return DataLoadError(
            f"expected {expected}, got {type(value).__name__} ({value!r})",
            path=str(path),
            index=index,
            key=field.key,
        )

    if field.kind == FieldKind.STRING:
        if not isinstance(value, str):
            raise fail("a string")
        return value
    if field.kind == FieldKind.INT:
        # bool is a subclass of int; JSON true/false is not an ID
        if isinstance(value, bool) or not isinstance(value, int):
            raise fail("an integer")
        return value
    if field.kind == FieldKind.BOOL:
        if not isinstance(value, bool):
            raise fail("a boolean")
        return value
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise fail("a list of strings")
    return tuple(value)


def _decode_record(
    raw: Any, cls: Type[T], fields: Tuple[FieldDef, ...], path: Path, index: int
) -> T:
    if not isinstance(raw, dict):
        raise DataLoadError(
            f"expected an object, got {type(raw).__name__}", path=str(path), index=index
        )
    kwargs = {f.attr: _coerce(raw.get(f.key), f, path, index) for f in fields}
    return cls(**kwargs)


def _read_json_array(path: Path) -> List[Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DataLoadError(f"cannot read data file: {e}", path=str(path)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataLoadError(f"invalid JSON: {e}", path=str(path)) from e
    if not isinstance(data, list):
        raise DataLoadError(
            f"expected a JSON array of records, got {type(data).__name__}", path=str(path)
        )
    return data


def _load_collection(
    path: PathLike, cls: Type[T], fields: Tuple[FieldDef, ...], label: str
) -> List[T]:
    path = Path(path)
    records = [
        _decode_record(raw, cls, fields, path, i) for i, raw in enumerate(_read_json_array(path))
    ]
    logger.info("Loaded %d %s from %s", len(records), label, path)
    return records


def load_organizations(path: PathLike) -> List[Organization]:
    """Read organizations from a JSON file.

    Raises:
        DataLoadError: If the file is unreadable, not JSON, or a record does
            not match the organization schema.
    """
    return _load_collection(path, Organization, ORGANIZATION_FIELDS, "organizations")


def load_users(path: PathLike) -> List[User]:
    """Read users from a JSON file. Raises DataLoadError like load_organizations."""
    return _load_collection(path, User, USER_FIELDS, "users")


def load_tickets(path: PathLike) -> List[Ticket]:
    """Read tickets from a JSON file. Raises DataLoadError like load_organizations."""
    return _load_collection(path, Ticket, TICKET_FIELDS, "tickets")


def load_store(
    organizations_path: PathLike, users_path: PathLike, tickets_path: PathLike
) -> EntityStore:
    """Load all three collections into an EntityStore.

    Args:
        organizations_path: JSON file of organizations.
        users_path: JSON file of users.
        tickets_path: JSON file of tickets.

    Returns:
        EntityStore holding the collections in file order.

    Raises:
        DataLoadError: If any of the files fails to load.

    Examples:
        >>> store = load_store("data/organizations.json", "data/users.json", "data/tickets.json")
        >>> store.counts()
        {'organizations': 3, 'users': 4, 'tickets': 4}
    """
    return EntityStore(
        organizations=load_organizations(organizations_path),
        users=load_users(users_path),
        tickets=load_tickets(tickets_path),
    )


__all__ = [
    "load_organizations",
    "load_users",
    "load_tickets",
    "load_store",
]
