"""Core query engine public API.

Exposes the functions used by the CLI layer. Implementations live in sibling
modules: field accessor tables, predicate matching, relationship indexes,
collection scans and result materialization.
"""

from .context import SearchContext
from .fields import get_accessor, get_field, list_fields, resolve_entity_kind
from .indexes import SearchIndexes, build_indexes
from .match import build_predicate, matches
from .materialize import (
    AugmentedOrganization,
    AugmentedTicket,
    AugmentedUser,
    materialize,
)
from .scan import search

__all__ = [
    "SearchContext",
    "get_accessor",
    "get_field",
    "list_fields",
    "resolve_entity_kind",
    "SearchIndexes",
    "build_indexes",
    "build_predicate",
    "matches",
    "AugmentedOrganization",
    "AugmentedUser",
    "AugmentedTicket",
    "materialize",
    "search",
]
