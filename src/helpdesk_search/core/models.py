"""Entity and store data models.

This module defines the loaded entities and the container that owns them:
- Organization, User, Ticket: one record from each data file
- EntityStore: the three collections, fixed once loaded

All models are frozen. List-valued fields are tuples so that nothing reachable
from the store can be changed after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from .enums import EntityKind
from .schemas import FieldDef, ORGANIZATION_FIELDS, TICKET_FIELDS, USER_FIELDS


def _to_record(entity: Any, fields: Tuple[FieldDef, ...]) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    for f in fields:
        value = getattr(entity, f.attr)
        record[f.key] = list(value) if isinstance(value, tuple) else value
    return record


@dataclass(frozen=True)
class Organization:
    """An organization record.

    Attributes:
        id: Organization ID; other collections refer to it via organization_id.
        domain_names: Domain names owned by the organization.
        shared_tickets: Whether tickets are shared across the organization.
        tags: Free-form tags.

    Examples:
        >>> Organization(id=101, name="Enthaze", tags=("Fulton", "West"))
    """

    id: int = 0
    name: str = ""
    url: str = ""
    external_id: str = ""
    domain_names: Tuple[str, ...] = ()
    created_at: str = ""
    details: str = ""
    shared_tickets: bool = False
    tags: Tuple[str, ...] = ()

    def to_record(self) -> Dict[str, Any]:
        """Return the record keyed by JSON data-file keys."""
        return _to_record(self, ORGANIZATION_FIELDS)


@dataclass(frozen=True)
class User:
    """A user record.

    ``organization_id`` refers to an Organization ID but is not enforced; it
    may name an organization that was never loaded.
    """

    id: int = 0
    name: str = ""
    url: str = ""
    external_id: str = ""
    alias: str = ""
    created_at: str = ""
    active: bool = False
    verified: bool = False
    shared: bool = False
    locale: str = ""
    timezone: str = ""
    last_login_at: str = ""
    email: str = ""
    phone: str = ""
    signature: str = ""
    tags: Tuple[str, ...] = ()
    suspended: bool = False
    role: str = ""
    organization_id: int = 0

    def to_record(self) -> Dict[str, Any]:
        """Return the record keyed by JSON data-file keys."""
        return _to_record(self, USER_FIELDS)


@dataclass(frozen=True)
class Ticket:
    """A ticket record.

    The ticket ID is a string (a UUID in the shipped data), unlike the integer
    IDs of organizations and users. ``organization_id``, ``submitter_id`` and
    ``assignee_id`` are unenforced references.
    """

    id: str = ""
    url: str = ""
    external_id: str = ""
    created_at: str = ""
    priority: str = ""
    status: str = ""
    type: str = ""
    subject: str = ""
    description: str = ""
    tags: Tuple[str, ...] = ()
    organization_id: int = 0
    has_incidents: bool = False
    due_at: str = ""
    submitter_id: int = 0
    assignee_id: int = 0
    via: str = ""

    def to_record(self) -> Dict[str, Any]:
        """Return the record keyed by JSON data-file keys."""
        return _to_record(self, TICKET_FIELDS)


Entity = Union[Organization, User, Ticket]

ENTITY_TYPES = {
    EntityKind.ORGANIZATION: Organization,
    EntityKind.USER: User,
    EntityKind.TICKET: Ticket,
}


def kind_of(entity: Entity) -> EntityKind:
    """Return the EntityKind of a model instance.

    Raises:
        TypeError: If ``entity`` is not one of the entity models.
    """
    for kind, cls in ENTITY_TYPES.items():
        if isinstance(entity, cls):
            return kind
    raise TypeError(f"Not an entity: {type(entity).__name__}")


@dataclass(frozen=True)
class EntityStore:
    """The three loaded collections, in load order.

    The store is built once at startup and only read afterwards. Duplicate IDs
    are kept; full scans see every record.

    Examples:
        >>> store = EntityStore(organizations=(Organization(id=1),))
        >>> len(store.collection(EntityKind.ORGANIZATION))
        1
    """

    organizations: Tuple[Organization, ...] = ()
    users: Tuple[User, ...] = ()
    tickets: Tuple[Ticket, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but hold tuples.
        object.__setattr__(self, "organizations", tuple(self.organizations))
        object.__setattr__(self, "users", tuple(self.users))
        object.__setattr__(self, "tickets", tuple(self.tickets))

    def collection(self, kind: EntityKind) -> Tuple[Entity, ...]:
        """Return the collection holding entities of ``kind``."""
        if kind == EntityKind.ORGANIZATION:
            return self.organizations
        if kind == EntityKind.USER:
            return self.users
        return self.tickets

    def counts(self) -> Dict[str, int]:
        return {
            "organizations": len(self.organizations),
            "users": len(self.users),
            "tickets": len(self.tickets),
        }


__all__ = [
    "Organization",
    "User",
    "Ticket",
    "Entity",
    "ENTITY_TYPES",
    "kind_of",
    "EntityStore",
]
