"""Helpdesk Search: ad hoc field queries over organizations, users and tickets.

The three collections are loaded from JSON once, indexed by their
relationships, and then searched by any field name. Matches can be augmented
with related entities (an organization's users and tickets, a ticket's
submitter, and so on).
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
