from __future__ import annotations

import logging
from typing import List, Union

from ..enums import EntityKind
from ..models import Entity, EntityStore
from .fields import resolve_entity_kind
from .match import build_predicate

logger = logging.getLogger(__name__)


def search(
    store: EntityStore,
    kind: Union[EntityKind, str],
    field_name: str,
    search_value: str,
) -> List[Entity]:
    """Return every entity of ``kind`` whose ``field_name`` matches, in load order.

    A full linear scan; nothing is cached between calls. Any error aborts the
    whole search rather than skipping the offending record.
    """
    entity_kind = resolve_entity_kind(kind)
    predicate = build_predicate(entity_kind, field_name, search_value)
    results = [entity for entity in store.collection(entity_kind) if predicate(entity)]
    logger.debug(
        "search %s %s=%r: %d match(es)", entity_kind.value, field_name, search_value, len(results)
    )
    return results
