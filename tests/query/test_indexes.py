"""Tests for relationship index building."""

import logging

from helpdesk_search.core.models import EntityStore, Organization, Ticket, User
from helpdesk_search.core.query.indexes import (
    build_indexes,
    index_assigned_tickets,
    index_organization_tickets,
    index_organization_users,
    index_organizations,
    index_submitted_tickets,
    index_users,
)


def _ids(entities):
    return [e.id for e in entities]


def test_index_organizations_by_id(store):
    index = index_organizations(store.organizations)
    assert sorted(index) == [101, 102, 104]
    assert index[104].name == "Zolarex"


def test_index_users_by_id(store):
    index = index_users(store.users)
    assert sorted(index) == [1, 2, 3, 4]
    assert index[3].name == "Ingrid Wagner"


def test_id_index_first_occurrence_wins(caplog):
    first = Organization(id=104, name="First")
    second = Organization(id=104, name="Second")

    with caplog.at_level(logging.WARNING):
        index = index_organizations([first, second])

    assert index[104] is first
    assert "Duplicate organization ID 104" in caplog.text


def test_user_id_index_first_occurrence_wins():
    first = User(id=7, name="First")
    index = index_users([first, User(id=7, name="Second")])
    assert index[7] is first


def test_organization_users_preserve_order(store):
    index = index_organization_users(store.users)
    assert _ids(index[104]) == [1, 2, 4]
    assert _ids(index[101]) == [3]
    assert 102 not in index


def test_organization_tickets_preserve_order(store):
    index = index_organization_tickets(store.tickets)
    assert _ids(index[104]) == ["t-1", "t-3"]
    assert _ids(index[101]) == ["t-2"]
    # Unresolvable organization IDs are still indexed
    assert _ids(index[112]) == ["t-4"]


def test_submitted_tickets_include_unknown_submitters(store):
    index = index_submitted_tickets(store.tickets)
    assert _ids(index[1]) == ["t-1", "t-3"]
    assert _ids(index[3]) == ["t-2"]
    assert _ids(index[71]) == ["t-4"]


def test_assigned_tickets(store):
    index = index_assigned_tickets(store.tickets)
    assert _ids(index[3]) == ["t-1"]
    assert _ids(index[1]) == ["t-2"]
    assert _ids(index[4]) == ["t-3"]
    assert _ids(index[38]) == ["t-4"]


def test_buckets_are_tuples(store):
    index = index_organization_users(store.users)
    assert all(isinstance(bucket, tuple) for bucket in index.values())


def test_build_indexes_covers_every_relationship(store):
    indexes = build_indexes(store)

    assert indexes.organizations_by_id[101].name == "Enthaze"
    assert indexes.users_by_id[1].name == "Francisca Rasmussen"
    assert len(indexes.users_by_organization[104]) == 3
    assert len(indexes.tickets_by_organization[104]) == 2
    assert _ids(indexes.tickets_by_submitter[1]) == ["t-1", "t-3"]
    assert _ids(indexes.tickets_by_assignee[38]) == ["t-4"]


def test_build_indexes_does_not_modify_store(store):
    before = (store.organizations, store.users, store.tickets)
    build_indexes(store)
    assert (store.organizations, store.users, store.tickets) == before


def test_build_indexes_on_empty_store():
    indexes = build_indexes(EntityStore())
    assert indexes.organizations_by_id == {}
    assert indexes.tickets_by_assignee == {}


def test_ticket_without_references_is_indexed_under_zero():
    """Missing references load as 0 and group like any other value."""
    tickets = [Ticket(id="a"), Ticket(id="b", submitter_id=5)]
    index = index_submitted_tickets(tickets)
    assert _ids(index[0]) == ["a"]
    assert _ids(index[5]) == ["b"]
