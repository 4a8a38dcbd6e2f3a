"""Turn one line of interactive input into a search request."""

from __future__ import annotations

from dataclasses import dataclass

SEARCH_FORMAT_ERROR = (
    "Invalid search format. Search format: $> <searchtype> <searchfield> <search values>"
)


@dataclass(frozen=True)
class SearchRequest:
    kind: str
    field_name: str
    value: str


def parse_search_input(line: str) -> SearchRequest:
    """Split ``<searchtype> <searchfield> [search value...]``.

    The search type is lower-cased; the field name is kept as typed since
    field names are case-sensitive. Everything after the field name, trimmed,
    is the search value, so it may contain spaces or be empty.

    Raises:
        ValueError: If the line has fewer than two tokens.

    Examples:
        >>> parse_search_input("ORG Name  Enthaze\\n")
        SearchRequest(kind='org', field_name='Name', value='Enthaze')
        >>> parse_search_input("ticket Description")
        SearchRequest(kind='ticket', field_name='Description', value='')
    """
    parts = line.strip().split(maxsplit=2)
    if len(parts) < 2:
        raise ValueError(SEARCH_FORMAT_ERROR)
    value = parts[2].strip() if len(parts) > 2 else ""
    return SearchRequest(kind=parts[0].lower(), field_name=parts[1], value=value)
