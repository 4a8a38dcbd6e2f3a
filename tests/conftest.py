"""Shared pytest fixtures and helpers for search tests."""

import json
from pathlib import Path
from typing import Dict

import pytest

from helpdesk_search.core.models import EntityStore, Organization, Ticket, User
from helpdesk_search.core.query import SearchContext

REPO_ROOT = Path(__file__).resolve().parent.parent


def make_store() -> EntityStore:
    """Small store covering every relationship shape.

    - Organization 104 has 3 users (1, 2, 4) and 2 tickets (t-1, t-3).
    - Organization 102 has no users and no tickets.
    - Ticket t-4 references submitter 71, assignee 38 and organization 112,
      none of which exist.
    """
    organizations = [
        Organization(
            id=101,
            name="Enthaze",
            url="http://initech.zendesk.com/api/v2/organizations/101.json",
            external_id="9270ed79-35eb-4a38-a46f-35725197ea8d",
            domain_names=("kage.com", "ecratic.com"),
            created_at="2016-05-21T11:10:28 -10:00",
            details="MegaCorp",
            shared_tickets=False,
            tags=("Fulton", "West"),
        ),
        Organization(
            id=102,
            name="Nutralab",
            details="",
            shared_tickets=True,
            tags=("Cherry", "New York"),
        ),
        Organization(
            id=104,
            name="Zolarex",
            details="Non profit",
            shared_tickets=False,
            tags=("Cherry",),
        ),
    ]
    users = [
        User(
            id=1,
            name="Francisca Rasmussen",
            email="coffeyrasmussen@flotonic.com",
            active=True,
            verified=True,
            tags=("Springville", "Sutton"),
            role="admin",
            organization_id=104,
        ),
        User(id=2, name="Cross Barlow", active=False, role="end-user", organization_id=104),
        User(id=3, name="Ingrid Wagner", active=True, role="agent", organization_id=101),
        User(id=4, name="Rose Newton", active=True, role="end-user", organization_id=104),
    ]
    tickets = [
        Ticket(
            id="t-1",
            subject="A Catastrophe in Korea",
            priority="high",
            status="pending",
            tags=("Ohio", "Pennsylvania"),
            organization_id=104,
            has_incidents=False,
            submitter_id=1,
            assignee_id=3,
            via="web",
        ),
        Ticket(
            id="t-2",
            subject="A Nuisance in Kiribati",
            priority="low",
            status="open",
            tags=("Ohio",),
            organization_id=101,
            has_incidents=True,
            submitter_id=3,
            assignee_id=1,
            via="chat",
        ),
        Ticket(
            id="t-3",
            subject="A Problem in Morocco",
            priority="high",
            status="solved",
            organization_id=104,
            has_incidents=True,
            submitter_id=1,
            assignee_id=4,
            via="web",
        ),
        Ticket(
            id="t-4",
            subject="A Drama in Portugal",
            priority="urgent",
            status="pending",
            tags=("Texas",),
            organization_id=112,
            submitter_id=71,
            assignee_id=38,
            via="voice",
        ),
    ]
    return EntityStore(organizations=organizations, users=users, tickets=tickets)


def write_store(directory: Path, store: EntityStore) -> Dict[str, Path]:
    """Write ``store`` as the three JSON data files and return their paths."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = {
        "organizations": directory / "organizations.json",
        "users": directory / "users.json",
        "tickets": directory / "tickets.json",
    }
    collections = {
        "organizations": store.organizations,
        "users": store.users,
        "tickets": store.tickets,
    }
    for name, path in paths.items():
        records = [e.to_record() for e in collections[name]]
        path.write_text(json.dumps(records), encoding="utf-8")
    return paths


@pytest.fixture
def store() -> EntityStore:
    return make_store()


@pytest.fixture
def context(store: EntityStore) -> SearchContext:  # pylint: disable=redefined-outer-name
    return SearchContext.from_store(store)


@pytest.fixture
def data_files(tmp_path: Path) -> Dict[str, Path]:
    """The sample store written to JSON files under tmp_path."""
    return write_store(tmp_path / "data", make_store())
