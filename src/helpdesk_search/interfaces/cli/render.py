"""Render materialized search results as console text or JSON."""

from __future__ import annotations

import json
from typing import Iterable, List, Optional, Sequence, Tuple

from helpdesk_search.core.enums import EntityKind
from helpdesk_search.core.models import Organization, Ticket, User
from helpdesk_search.core.query.materialize import (
    Augmented,
    AugmentedOrganization,
    AugmentedTicket,
    AugmentedUser,
)

NO_RESULTS = "<No results found>"

Lines = List[Tuple[str, object]]


def _fmt(value: object) -> str:
    if isinstance(value, tuple):
        return ", ".join(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _block(lines: Lines, indent: str = "") -> str:
    return "".join(f"{indent}{label}: {_fmt(value)}\n" for label, value in lines)


def _heading(title: str, indent: str = "") -> str:
    return f"{indent}{title}\n{indent}{'-' * len(title)}\n"


def organization_lines(org: Organization) -> Lines:
    return [
        ("Organization ID", org.id),
        ("Name", org.name),
        ("URL", org.url),
        ("External ID", org.external_id),
        ("Domain Names", org.domain_names),
        ("Created At", org.created_at),
        ("Details", org.details),
        ("Shared Tickets", org.shared_tickets),
        ("Tags", org.tags),
    ]


def user_lines(user: User) -> Lines:
    return [
        ("ID", user.id),
        ("Name", user.name),
        ("URL", user.url),
        ("External ID", user.external_id),
        ("Alias", user.alias),
        ("Created At", user.created_at),
        ("Active", user.active),
        ("Verified", user.verified),
        ("Shared", user.shared),
        ("Locale", user.locale),
        ("Time Zone", user.timezone),
        ("Last Login At", user.last_login_at),
        ("Email", user.email),
        ("Phone", user.phone),
        ("Signature", user.signature),
        ("Tags", user.tags),
        ("Suspended", user.suspended),
        ("Role", user.role),
        ("Organization", user.organization_id),
    ]


def ticket_lines(ticket: Ticket) -> Lines:
    return [
        ("Ticket ID", ticket.id),
        ("URL", ticket.url),
        ("External ID", ticket.external_id),
        ("Created At", ticket.created_at),
        ("Priority", ticket.priority),
        ("Status", ticket.status),
        ("Type", ticket.type),
        ("Subject", ticket.subject),
        ("Description", ticket.description),
        ("Tags", ticket.tags),
        ("Organization", ticket.organization_id),
        ("Has Incidents", ticket.has_incidents),
        ("Due At", ticket.due_at),
        ("Submitter", ticket.submitter_id),
        ("Assignee", ticket.assignee_id),
        ("Via", ticket.via),
    ]


def _nested_many(title: str, blocks: Iterable[Lines], empty: str) -> str:
    out = "\n" + _heading(title, "\t")
    rendered = ["\n" + _block(lines, "\t") for lines in blocks]
    if not rendered:
        return out + f"\t{empty}\n"
    return out + "".join(rendered)


def _nested_one(title: str, lines: Optional[Lines], empty: str) -> str:
    out = "\n" + _heading(title, "\t")
    if lines is None:
        return out + f"\t{empty}\n"
    return out + "\n" + _block(lines, "\t")


def format_organizations(results: Sequence[AugmentedOrganization]) -> str:
    out = "\n" + _heading("ORGS")
    if not results:
        return out + NO_RESULTS + "\n"
    for r in results:
        out += "\n" + _block(organization_lines(r.organization))
        out += _nested_many(
            "ASSOCIATED USERS",
            (user_lines(u) for u in r.users),
            "<No associated users found for this organization>",
        )
        out += _nested_many(
            "ASSOCIATED TICKETS",
            (ticket_lines(t) for t in r.tickets),
            "<No associated tickets found for this organization>",
        )
    return out


def format_users(results: Sequence[AugmentedUser]) -> str:
    out = "\n" + _heading("USERS")
    if not results:
        return out + NO_RESULTS + "\n"
    for r in results:
        out += "\n" + _block(user_lines(r.user))
        out += _nested_one(
            "ASSOCIATED ORG",
            organization_lines(r.organization) if r.organization is not None else None,
            "<No associated organization found for this user>",
        )
        out += _nested_many(
            "TICKETS (SUBMITTED)",
            (ticket_lines(t) for t in r.submitted_tickets),
            "<No submitted tickets found for this user>",
        )
        out += _nested_many(
            "TICKETS (ASSIGNED)",
            (ticket_lines(t) for t in r.assigned_tickets),
            "<No assigned tickets found for this user>",
        )
    return out


def format_tickets(results: Sequence[AugmentedTicket]) -> str:
    out = "\n" + _heading("TICKETS")
    if not results:
        return out + NO_RESULTS + "\n"
    for r in results:
        out += "\n" + _block(ticket_lines(r.ticket))
        out += _nested_one(
            "ASSOCIATED ORG",
            organization_lines(r.organization) if r.organization is not None else None,
            "<No associated organization found for this ticket>",
        )
        out += _nested_one(
            "SUBMITTER",
            user_lines(r.submitter) if r.submitter is not None else None,
            "<No submitter found for this ticket>",
        )
        out += _nested_one(
            "ASSIGNEE",
            user_lines(r.assignee) if r.assignee is not None else None,
            "<No assignee found for this ticket>",
        )
    return out


def render_text(kind: EntityKind, results: Sequence[Augmented]) -> str:
    if kind == EntityKind.ORGANIZATION:
        return format_organizations(results)  # type: ignore[arg-type]
    if kind == EntityKind.USER:
        return format_users(results)  # type: ignore[arg-type]
    return format_tickets(results)  # type: ignore[arg-type]


def render_json(results: Sequence[Augmented]) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False)
