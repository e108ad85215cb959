"""Tests for the standard check chain and the ``throw`` entry points."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from sims_util.core.enums import Category
from sims_util.core.errors import (
    CheckError,
    FailedAssertionError,
    InvalidValueError,
    MissingValueError,
)
from sims_util.validation import Checker, StandardFailure, rules, throw
from sims_util.validation.checker import run_assertion, run_check


class TestNullChecks:
    def test_if_null_raises_missing(self) -> None:
        with pytest.raises(MissingValueError):
            throw.if_null(None)

    def test_if_null_passes_for_empty_string(self) -> None:
        throw.if_null("")

    def test_if_not_null_raises_invalid(self) -> None:
        with pytest.raises(InvalidValueError, match="NOT NULL"):
            throw.if_not_null("", "NOT NULL")

    def test_if_not_null_passes_for_none(self) -> None:
        throw.if_not_null(None)


class TestEmptyChecks:
    def test_if_empty_raises_invalid_for_zero_length(self) -> None:
        with pytest.raises(InvalidValueError, match="EMPTY"):
            throw.if_empty("", "EMPTY")

    def test_if_empty_raises_missing_for_none(self) -> None:
        with pytest.raises(MissingValueError):
            throw.if_empty(None)

    def test_if_empty_accepts_any_sized_value(self) -> None:
        with pytest.raises(InvalidValueError):
            throw.if_empty([])
        throw.if_empty([0])

    def test_if_empty_passes_for_whitespace(self) -> None:
        throw.if_empty(" ")

    def test_if_not_empty_raises_for_content(self) -> None:
        with pytest.raises(InvalidValueError, match="NOT EMPTY"):
            throw.if_not_empty(" ", "NOT EMPTY")

    @pytest.mark.parametrize("value", [None, ""])
    def test_if_not_empty_passes(self, value) -> None:
        throw.if_not_empty(value)


class TestBlankChecks:
    def test_if_blank_raises_invalid_for_whitespace(self) -> None:
        with pytest.raises(InvalidValueError, match="BLANK"):
            throw.if_blank(" ", "BLANK")

    def test_if_blank_raises_invalid_for_empty(self) -> None:
        with pytest.raises(InvalidValueError):
            throw.if_blank("")

    def test_if_blank_raises_missing_for_none(self) -> None:
        with pytest.raises(MissingValueError):
            throw.if_blank(None)

    def test_if_blank_uses_unicode_whitespace(self) -> None:
        with pytest.raises(InvalidValueError):
            throw.if_blank("\u2003\t\u00a0\n")

    def test_if_blank_passes_for_content(self) -> None:
        throw.if_blank("123")

    def test_if_not_blank_raises_for_content(self) -> None:
        with pytest.raises(InvalidValueError, match="NOT BLANK"):
            throw.if_not_blank("123", "NOT BLANK")

    @pytest.mark.parametrize("value", [None, "", "  \t"])
    def test_if_not_blank_passes(self, value) -> None:
        throw.if_not_blank(value)


class TestErrors:
    def test_message_is_carried(self) -> None:
        with pytest.raises(MissingValueError) as exc_info:
            throw.if_null(None, "NULL")
        assert exc_info.value.message == "NULL"
        assert str(exc_info.value) == "NULL"

    def test_missing_message_becomes_empty_string(self) -> None:
        with pytest.raises(MissingValueError) as exc_info:
            throw.if_null(None)
        assert exc_info.value.message == ""

    def test_category_attribute(self) -> None:
        with pytest.raises(CheckError) as exc_info:
            throw.if_empty("")
        assert exc_info.value.category == Category.INVALID

    def test_standard_errors_are_builtin_compatible(self) -> None:
        assert issubclass(MissingValueError, ValueError)
        assert issubclass(InvalidValueError, ValueError)
        assert issubclass(FailedAssertionError, AssertionError)

    def test_standard_failure_maps_categories(self) -> None:
        with pytest.raises(FailedAssertionError, match="nope"):
            StandardFailure().fail(Category.ASSERTION, "nope")


class TestChaining:
    def test_passing_chain_returns_same_object(self) -> None:
        chain = Checker()
        result = (
            chain
            .if_null("")
            .if_empty(" ")
            .if_blank("123")
            .if_not_null(None)
            .if_not_empty("")
            .if_not_blank(" ")
        )
        assert result is chain

    def test_entry_point_returns_checker(self) -> None:
        chain = throw.if_null("value")
        assert isinstance(chain, Checker)
        assert chain.if_blank("x") is chain

    def test_failure_stops_the_chain(self) -> None:
        sized = MagicMock()
        sized.__len__.return_value = 1

        with pytest.raises(MissingValueError):
            Checker().if_null(None).if_empty(sized)

        sized.__len__.assert_not_called()

    def test_default_strategy_is_standard(self) -> None:
        assert isinstance(Checker().strategy, StandardFailure)


class TestCheckHelpers:
    def test_run_check_passes_category_and_message_to_strategy(self) -> None:
        strategy = MagicMock()
        run_check(strategy, rules.empty, "", lambda: "empty!")
        strategy.fail.assert_called_once_with(Category.INVALID, "empty!")

    def test_run_check_skips_message_for_passing_value(self) -> None:
        strategy = MagicMock()
        message = MagicMock(return_value="unused")
        run_check(strategy, rules.null, "present", message)
        strategy.fail.assert_not_called()
        message.assert_not_called()

    def test_run_assertion_normalizes_missing_message(self) -> None:
        strategy = MagicMock()
        run_assertion(strategy, True, lambda: None)
        strategy.fail.assert_called_once_with(Category.ASSERTION, "")

    def test_checker_uses_injected_strategy(self) -> None:
        strategy = MagicMock()
        chain = Checker(strategy)
        assert chain.with_message("%s").if_blank(" ", "title").if_null("x") is not None
        strategy.fail.assert_called_once_with(Category.INVALID, "title")
