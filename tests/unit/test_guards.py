"""Tests for null/empty/blank predicates and default-value helpers."""

import pytest

from sims_util.core.defaults import not_blank, not_empty, not_null, safe_list
from sims_util.core.text import is_blank, is_empty


class TestPredicates:
    @pytest.mark.parametrize("value, expected", [(None, True), ("", True), ([], True), (" ", False)])
    def test_is_empty(self, value, expected):
        assert is_empty(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, True),
            ("", True),
            (" \t\r\n", True),
            ("\u00a0 \u2003", True),
            (" x ", False),
        ],
    )
    def test_is_blank(self, value, expected):
        assert is_blank(value) is expected


class TestDefaults:
    def test_not_null(self):
        assert not_null(None, "NULL") == "NULL"
        assert not_null("NOT NULL", "NULL") == "NOT NULL"
        assert not_null(0, 5) == 0

    def test_not_empty(self):
        assert not_empty("", "EMPTY") == "EMPTY"
        assert not_empty(None, "EMPTY") == "EMPTY"
        assert not_empty("NOT EMPTY", "EMPTY") == "NOT EMPTY"

    def test_not_blank(self):
        assert not_blank(" ", "BLANK") == "BLANK"
        assert not_blank(None, "BLANK") == "BLANK"
        assert not_blank("NOT BLANK", "BLANK") == "NOT BLANK"


class TestSafeList:
    def test_none_is_empty(self):
        assert safe_list(None) == []

    def test_sequence_is_copied(self):
        items = ["one", "two", "three"]
        result = safe_list(items)
        assert result == items
        assert result is not items

    def test_any_iterable(self):
        assert [s for s in safe_list(iter(("one",))) if s == "one"] == ["one"]
