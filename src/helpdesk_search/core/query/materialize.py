from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..enums import EntityKind
from ..models import Entity, Organization, Ticket, User
from .fields import resolve_entity_kind
from .indexes import SearchIndexes


def _records(entities: Iterable[Any]) -> List[Dict[str, Any]]:
    return [e.to_record() for e in entities]


def _record_or_none(entity: Optional[Any]) -> Optional[Dict[str, Any]]:
    return entity.to_record() if entity is not None else None


@dataclass(frozen=True)
class AugmentedOrganization:
    organization: Organization
    users: Tuple[User, ...] = ()
    tickets: Tuple[Ticket, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        out = self.organization.to_record()
        out["associated_users"] = _records(self.users)
        out["associated_tickets"] = _records(self.tickets)
        return out


@dataclass(frozen=True)
class AugmentedUser:
    user: User
    organization: Optional[Organization] = None
    submitted_tickets: Tuple[Ticket, ...] = ()
    assigned_tickets: Tuple[Ticket, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        out = self.user.to_record()
        out["organization"] = _record_or_none(self.organization)
        out["submitted_tickets"] = _records(self.submitted_tickets)
        out["assigned_tickets"] = _records(self.assigned_tickets)
        return out


@dataclass(frozen=True)
class AugmentedTicket:
    ticket: Ticket
    submitter: Optional[User] = None
    assignee: Optional[User] = None
    organization: Optional[Organization] = None

    def to_dict(self) -> Dict[str, Any]:
        out = self.ticket.to_record()
        out["organization"] = _record_or_none(self.organization)
        out["submitter"] = _record_or_none(self.submitter)
        out["assignee"] = _record_or_none(self.assignee)
        return out


Augmented = Union[AugmentedOrganization, AugmentedUser, AugmentedTicket]


def materialize_organizations(
    organizations: Iterable[Organization], indexes: SearchIndexes
) -> List[AugmentedOrganization]:
    """Attach member users and tickets to each organization (empty when none)."""
    return [
        AugmentedOrganization(
            organization=org,
            users=indexes.users_by_organization.get(org.id, ()),
            tickets=indexes.tickets_by_organization.get(org.id, ()),
        )
        for org in organizations
    ]


def materialize_users(users: Iterable[User], indexes: SearchIndexes) -> List[AugmentedUser]:
    """Attach the owning organization (None if unresolved) and the user's tickets."""
    return [
        AugmentedUser(
            user=user,
            organization=indexes.organizations_by_id.get(user.organization_id),
            submitted_tickets=indexes.tickets_by_submitter.get(user.id, ()),
            assigned_tickets=indexes.tickets_by_assignee.get(user.id, ()),
        )
        for user in users
    ]


def materialize_tickets(
    tickets: Iterable[Ticket], indexes: SearchIndexes
) -> List[AugmentedTicket]:
    """Attach submitter, assignee and organization; each is None if it does not resolve."""
    return [
        AugmentedTicket(
            ticket=ticket,
            submitter=indexes.users_by_id.get(ticket.submitter_id),
            assignee=indexes.users_by_id.get(ticket.assignee_id),
            organization=indexes.organizations_by_id.get(ticket.organization_id),
        )
        for ticket in tickets
    ]


def materialize(
    kind: Union[EntityKind, str], entities: Sequence[Entity], indexes: SearchIndexes
) -> List[Augmented]:
    """Augment search results of ``kind`` with their related entities.

    Pure: neither ``entities`` nor anything in ``indexes`` is modified, and
    dangling references resolve to None or an empty tuple, never an error.
    """
    entity_kind = resolve_entity_kind(kind)
    if entity_kind == EntityKind.ORGANIZATION:
        return materialize_organizations(entities, indexes)  # type: ignore[arg-type]
    if entity_kind == EntityKind.USER:
        return materialize_users(entities, indexes)  # type: ignore[arg-type]
    return materialize_tickets(entities, indexes)  # type: ignore[arg-type]


__all__ = [
    "AugmentedOrganization",
    "AugmentedUser",
    "AugmentedTicket",
    "Augmented",
    "materialize_organizations",
    "materialize_users",
    "materialize_tickets",
    "materialize",
]
