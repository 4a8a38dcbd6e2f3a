"""CSV export of matched entities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from helpdesk_search.core.enums import EntityKind
from helpdesk_search.core.models import Entity
from helpdesk_search.core.schemas import get_schema

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ";"


def results_to_frame(kind: EntityKind, entities: Sequence[Entity]) -> pd.DataFrame:
    """One row per entity, columns named by data-file key in schema order.

    List fields are joined with ``;`` so each cell stays a scalar.
    """
    columns = [f.key for f in get_schema(kind)]
    rows = []
    for entity in entities:
        record = entity.to_record()
        rows.append(
            {
                k: LIST_SEPARATOR.join(v) if isinstance(v, list) else v
                for k, v in record.items()
            }
        )
    return pd.DataFrame(rows, columns=columns)


def export_csv(kind: EntityKind, entities: Sequence[Entity], output_path: Path) -> Path:
    """Write matched entities to ``output_path`` and return the path."""
    df = results_to_frame(kind, entities)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False, encoding="utf-8")
    logger.info("Exported %d %s record(s) to %s", len(df), kind.value, output_path)
    return output_path
