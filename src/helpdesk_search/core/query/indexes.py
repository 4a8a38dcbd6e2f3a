"""Relationship indexes, built once after load.

Each builder is a single pass over one collection. ID indexes keep the first
record seen for an ID; later duplicates stay in the store (full scans find
them) but cannot be reached by ID. Grouping indexes keep the collection's
order inside each bucket, and are keyed on the raw reference value whether
or not it resolves to a loaded entity.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Tuple, TypeVar

from ..models import EntityStore, Organization, Ticket, User

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _first_by_id(items: Iterable[T], label: str) -> Dict[int, T]:
    index: Dict[int, T] = {}
    for item in items:
        item_id = getattr(item, "id")
        if item_id in index:
            logger.warning(
                "Duplicate %s ID %s: keeping the first record for ID lookups", label, item_id
            )
            continue
        index[item_id] = item
    return index


def _group_by(items: Iterable[T], key: Callable[[T], int]) -> Dict[int, Tuple[T, ...]]:
    buckets: Dict[int, List[T]] = defaultdict(list)
    for item in items:
        buckets[key(item)].append(item)
    return {k: tuple(v) for k, v in buckets.items()}


def index_organizations(organizations: Iterable[Organization]) -> Dict[int, Organization]:
    """Organization ID -> Organization (first occurrence wins)."""
    return _first_by_id(organizations, "organization")


def index_users(users: Iterable[User]) -> Dict[int, User]:
    """User ID -> User (first occurrence wins)."""
    return _first_by_id(users, "user")


def index_organization_users(users: Iterable[User]) -> Dict[int, Tuple[User, ...]]:
    """Organization ID -> users whose organization_id is that ID."""
    return _group_by(users, lambda u: u.organization_id)


def index_organization_tickets(tickets: Iterable[Ticket]) -> Dict[int, Tuple[Ticket, ...]]:
    """Organization ID -> tickets whose organization_id is that ID."""
    return _group_by(tickets, lambda t: t.organization_id)


def index_submitted_tickets(tickets: Iterable[Ticket]) -> Dict[int, Tuple[Ticket, ...]]:
    """User ID -> tickets submitted by that user."""
    return _group_by(tickets, lambda t: t.submitter_id)


def index_assigned_tickets(tickets: Iterable[Ticket]) -> Dict[int, Tuple[Ticket, ...]]:
    """User ID -> tickets assigned to that user."""
    return _group_by(tickets, lambda t: t.assignee_id)


@dataclass(frozen=True)
class SearchIndexes:
    """All relationship indexes derived from one EntityStore.

    Attributes:
        organizations_by_id: Organization ID -> first Organization with that ID.
        users_by_id: User ID -> first User with that ID.
        users_by_organization: Organization ID -> member users, in load order.
        tickets_by_organization: Organization ID -> tickets, in load order.
        tickets_by_submitter: User ID -> submitted tickets, in load order.
        tickets_by_assignee: User ID -> assigned tickets, in load order.
    """

    organizations_by_id: Dict[int, Organization] = field(default_factory=dict)
    users_by_id: Dict[int, User] = field(default_factory=dict)
    users_by_organization: Dict[int, Tuple[User, ...]] = field(default_factory=dict)
    tickets_by_organization: Dict[int, Tuple[Ticket, ...]] = field(default_factory=dict)
    tickets_by_submitter: Dict[int, Tuple[Ticket, ...]] = field(default_factory=dict)
    tickets_by_assignee: Dict[int, Tuple[Ticket, ...]] = field(default_factory=dict)


def build_indexes(store: EntityStore) -> SearchIndexes:
    """Build every relationship index for ``store``.

    Args:
        store: The loaded collections.

    Returns:
        SearchIndexes over the store's entities. The store is not modified.
    """
    indexes = SearchIndexes(
        organizations_by_id=index_organizations(store.organizations),
        users_by_id=index_users(store.users),
        users_by_organization=index_organization_users(store.users),
        tickets_by_organization=index_organization_tickets(store.tickets),
        tickets_by_submitter=index_submitted_tickets(store.tickets),
        tickets_by_assignee=index_assigned_tickets(store.tickets),
    )
    logger.debug(
        "Built indexes: %d organizations, %d users, %d org->user buckets, "
        "%d org->ticket buckets, %d submitter buckets, %d assignee buckets",
        len(indexes.organizations_by_id),
        len(indexes.users_by_id),
        len(indexes.users_by_organization),
        len(indexes.tickets_by_organization),
        len(indexes.tickets_by_submitter),
        len(indexes.tickets_by_assignee),
    )
    return indexes


__all__ = [
    "SearchIndexes",
    "build_indexes",
    "index_organizations",
    "index_users",
    "index_organization_users",
    "index_organization_tickets",
    "index_submitted_tickets",
    "index_assigned_tickets",
]
