from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from ..enums import EntityKind
from ..models import Entity, EntityStore
from .indexes import SearchIndexes, build_indexes
from .materialize import Augmented, materialize
from .scan import search


@dataclass(frozen=True)
class SearchContext:
    """Loaded store plus its indexes; created once at startup and passed around.

    Both halves are read-only, so one context can serve any number of queries.
    """

    store: EntityStore
    indexes: SearchIndexes

    @classmethod
    def from_store(cls, store: EntityStore) -> "SearchContext":
        return cls(store=store, indexes=build_indexes(store))

    def search(
        self, kind: Union[EntityKind, str], field_name: str, search_value: str
    ) -> List[Entity]:
        return search(self.store, kind, field_name, search_value)

    def search_materialized(
        self, kind: Union[EntityKind, str], field_name: str, search_value: str
    ) -> List[Augmented]:
        """Search, then attach related entities to each match."""
        return materialize(kind, self.search(kind, field_name, search_value), self.indexes)
