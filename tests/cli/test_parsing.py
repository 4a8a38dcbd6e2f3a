"""Tests for splitting interactive input into search requests."""

import pytest

from helpdesk_search.interfaces.cli.parsing import (
    SEARCH_FORMAT_ERROR,
    SearchRequest,
    parse_search_input,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("org ID 104", SearchRequest("org", "ID", "104")),
        ("ORG Name  Enthaze\n", SearchRequest("org", "Name", "Enthaze")),
        ("  user   Name   Cross Barlow  ", SearchRequest("user", "Name", "Cross Barlow")),
        ("ticket Subject A Drama in Portugal", SearchRequest("ticket", "Subject", "A Drama in Portugal")),
        ("ticket Description", SearchRequest("ticket", "Description", "")),
        ("ticket\tTags\tOhio", SearchRequest("ticket", "Tags", "Ohio")),
    ],
)
def test_parse_search_input(line, expected):
    assert parse_search_input(line) == expected


def test_field_name_case_is_kept():
    assert parse_search_input("Org organizationid 1").field_name == "organizationid"


def test_inner_spacing_of_value_is_kept():
    assert parse_search_input("user Alias Miss  Joni").value == "Miss  Joni"


@pytest.mark.parametrize("line", ["", "   ", "org", "org\n"])
def test_too_few_tokens(line):
    with pytest.raises(ValueError) as exc_info:
        parse_search_input(line)
    assert str(exc_info.value) == SEARCH_FORMAT_ERROR
