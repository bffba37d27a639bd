"""Tests for rotation_matcher.parsing"""

import pytest

from rotation_matcher.parsing import parse_leaders, parse_pool, parse_slots


@pytest.mark.parametrize("value, expected", [
    ("Anna, Till", ["Anna", "Till"]),
    ("  Miri ,Jamie  ", ["Miri", "Jamie"]),
    ("Sam", ["Sam"]),
    ("Anna,, Till,", ["Anna", "Till"]),
    ("", None),
    ("   ", None),
    (None, None),
    (",", None),
    (" , ", None),
])
def test_parse_leaders(value, expected):
    """Test splitting and trimming of leader strings."""
    assert parse_leaders(value) == expected


def test_parse_slots_keeps_open_positions():
    """Test that blank slot fields become open slots in place."""
    assert parse_slots(["Anna, Till", "", "Miri"]) == [["Anna", "Till"], None, ["Miri"]]


def test_parse_pool_skips_blank_lines():
    """Test that blank pool lines are dropped."""
    assert parse_pool(["Anna, Till", "", "  ", "Miri, Jamie"]) == [["Anna", "Till"], ["Miri", "Jamie"]]


def test_fields_without_names_are_open():
    """Test that a field holding only commas is an open slot, not an empty team."""
    assert parse_slots(["Anna", ",", ""]) == [["Anna"], None, None]
    assert parse_pool([" , "]) == []
    assert parse_pool(["Miri", " , "]) == [["Miri"]]
