"""Field definitions for organizations, users and tickets.

Each entity kind declares its fields once, in source order. A definition ties
together three names for the same field:

- ``name``: the case-sensitive name used in queries (e.g. ``OrganizationID``)
- ``key``: the key in the JSON data files (e.g. ``organization_id``)
- ``attr``: the attribute on the model dataclass (e.g. ``organization_id``)

The loaders use ``key`` and ``kind`` to decode records; the query layer uses
``name``, ``attr`` and ``kind`` to build its accessor tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .enums import EntityKind, FieldKind


@dataclass(frozen=True)
class FieldDef:
    name: str
    key: str
    attr: str
    kind: FieldKind


ORGANIZATION_FIELDS: Tuple[FieldDef, ...] = (
    FieldDef("ID", "_id", "id", FieldKind.INT),
    FieldDef("Name", "name", "name", FieldKind.STRING),
    FieldDef("URL", "url", "url", FieldKind.STRING),
    FieldDef("ExternalID", "external_id", "external_id", FieldKind.STRING),
    FieldDef("DomainNames", "domain_names", "domain_names", FieldKind.STRING_LIST),
    FieldDef("CreatedAt", "created_at", "created_at", FieldKind.STRING),
    FieldDef("Details", "details", "details", FieldKind.STRING),
    FieldDef("SharedTickets", "shared_tickets", "shared_tickets", FieldKind.BOOL),
    FieldDef("Tags", "tags", "tags", FieldKind.STRING_LIST),
)

USER_FIELDS: Tuple[FieldDef, ...] = (
    FieldDef("ID", "_id", "id", FieldKind.INT),
    FieldDef("Name", "name", "name", FieldKind.STRING),
    FieldDef("URL", "url", "url", FieldKind.STRING),
    FieldDef("ExternalID", "external_id", "external_id", FieldKind.STRING),
    FieldDef("Alias", "alias", "alias", FieldKind.STRING),
    FieldDef("CreatedAt", "created_at", "created_at", FieldKind.STRING),
    FieldDef("Active", "active", "active", FieldKind.BOOL),
    FieldDef("Verified", "verified", "verified", FieldKind.BOOL),
    FieldDef("Shared", "shared", "shared", FieldKind.BOOL),
    FieldDef("Locale", "locale", "locale", FieldKind.STRING),
    FieldDef("Timezone", "timezone", "timezone", FieldKind.STRING),
    FieldDef("LastLoginAt", "last_login_at", "last_login_at", FieldKind.STRING),
    FieldDef("Email", "email", "email", FieldKind.STRING),
    FieldDef("Phone", "phone", "phone", FieldKind.STRING),
    FieldDef("Signature", "signature", "signature", FieldKind.STRING),
    FieldDef("Tags", "tags", "tags", FieldKind.STRING_LIST),
    FieldDef("Suspended", "suspended", "suspended", FieldKind.BOOL),
    FieldDef("Role", "role", "role", FieldKind.STRING),
    FieldDef("OrganizationID", "organization_id", "organization_id", FieldKind.INT),
)

TICKET_FIELDS: Tuple[FieldDef, ...] = (
    FieldDef("ID", "_id", "id", FieldKind.STRING),
    FieldDef("URL", "url", "url", FieldKind.STRING),
    FieldDef("ExternalID", "external_id", "external_id", FieldKind.STRING),
    FieldDef("CreatedAt", "created_at", "created_at", FieldKind.STRING),
    FieldDef("Priority", "priority", "priority", FieldKind.STRING),
    FieldDef("Status", "status", "status", FieldKind.STRING),
    FieldDef("Type", "type", "type", FieldKind.STRING),
    FieldDef("Subject", "subject", "subject", FieldKind.STRING),
    FieldDef("Description", "description", "description", FieldKind.STRING),
    FieldDef("Tags", "tags", "tags", FieldKind.STRING_LIST),
    FieldDef("OrganizationID", "organization_id", "organization_id", FieldKind.INT),
    FieldDef("HasIncidents", "has_incidents", "has_incidents", FieldKind.BOOL),
    FieldDef("DueAt", "due_at", "due_at", FieldKind.STRING),
    FieldDef("SubmitterID", "submitter_id", "submitter_id", FieldKind.INT),
    FieldDef("AssigneeID", "assignee_id", "assignee_id", FieldKind.INT),
    FieldDef("Via", "via", "via", FieldKind.STRING),
)

_SCHEMAS: Dict[EntityKind, Tuple[FieldDef, ...]] = {
    EntityKind.ORGANIZATION: ORGANIZATION_FIELDS,
    EntityKind.USER: USER_FIELDS,
    EntityKind.TICKET: TICKET_FIELDS,
}


def get_schema(kind: EntityKind) -> Tuple[FieldDef, ...]:
    """Return the field definitions for an entity kind, in declaration order.

    Examples:
        >>> [f.name for f in get_schema(EntityKind.ORGANIZATION)][:3]
        ['ID', 'Name', 'URL']
    """
    return _SCHEMAS[kind]


__all__ = [
    "FieldDef",
    "ORGANIZATION_FIELDS",
    "USER_FIELDS",
    "TICKET_FIELDS",
    "get_schema",
]
