"""Fluent check chains.

A chain runs each check as soon as it is called. The first failing check
raises through the chain's failure strategy, which aborts the rest of the
statement::

    Checker().if_null(user).if_blank(user.name, "name is required")

Every check returns the chain itself, so a statement whose checks all
pass evaluates to the chain it started with.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from sims_util.core.enums import Category

from . import rules
from .message import MessageTemplate
from .protocol import IFailureStrategy
from .strategy import CustomFailure, ErrorFactory, StandardFailure

logger = logging.getLogger(__name__)

MessageSource = Callable[[], Optional[str]]


def run_check(
    strategy: IFailureStrategy, rule: rules.Rule, value: Any, message: MessageSource
) -> None:
    """Apply ``rule`` to ``value``; fail through ``strategy`` if it reports a category."""
    category = rule(value)
    if category is not None:
        _fail(strategy, category, message())


def run_assertion(strategy: IFailureStrategy, failed: bool, message: MessageSource) -> None:
    if failed:
        _fail(strategy, Category.ASSERTION, message())


def _fail(strategy: IFailureStrategy, category: Category, message: str | None) -> None:
    logger.debug("Check failed [%s]: %s", category.value, message)
    strategy.fail(category, message or "")


class Checker:
    """Check chain with literal messages."""

    def __init__(self, strategy: IFailureStrategy | None = None) -> None:
        self._strategy: IFailureStrategy = strategy or StandardFailure()

    @property
    def strategy(self) -> IFailureStrategy:
        return self._strategy

    def with_message(self, template: str) -> TemplatedChecker:
        """Share one message template across the following checks."""
        return TemplatedChecker(self, MessageTemplate(template))

    # -- null -----------------------------------------------------------

    def if_null(self, value: Any, message: str | None = None) -> Checker:
        return self._check(rules.null, value, lambda: message)

    def if_not_null(self, value: Any, message: str | None = None) -> Checker:
        return self._check(rules.not_null, value, lambda: message)

    # -- empty ----------------------------------------------------------

    def if_empty(self, value: Any, message: str | None = None) -> Checker:
        return self._check(rules.empty, value, lambda: message)

    def if_not_empty(self, value: Any, message: str | None = None) -> Checker:
        return self._check(rules.not_empty, value, lambda: message)

    # -- blank ----------------------------------------------------------

    def if_blank(self, value: str | None, message: str | None = None) -> Checker:
        return self._check(rules.blank, value, lambda: message)

    def if_not_blank(self, value: str | None, message: str | None = None) -> Checker:
        return self._check(rules.not_blank, value, lambda: message)

    # -- internals ------------------------------------------------------

    def _check(self, rule: rules.Rule, value: Any, message: MessageSource) -> Checker:
        run_check(self._strategy, rule, value, message)
        return self


class CustomChecker(Checker):
    """Check chain raising a caller-chosen error kind.

    ``factory`` is called with the failure message; an exception class is
    the usual choice. If it cannot produce an exception the standard error
    for the failure category is raised instead.
    """

    def __init__(self, factory: ErrorFactory | None = None) -> None:
        super().__init__(CustomFailure(factory))

    def with_message(self, template: str) -> CustomTemplatedChecker:
        return CustomTemplatedChecker(self, MessageTemplate(template))

    def if_true(self, expr: bool, message: str | None = None) -> CustomChecker:
        run_assertion(self.strategy, bool(expr), lambda: message)
        return self

    def if_false(self, expr: bool, message: str | None = None) -> CustomChecker:
        run_assertion(self.strategy, not expr, lambda: message)
        return self


class TemplatedChecker:
    """Check chain whose messages come from a shared template.

    Each check takes positional arguments for the template instead of a
    literal message. The template is only rendered for a failing check.
    """

    def __init__(self, checker: Checker, template: MessageTemplate) -> None:
        self._checker = checker
        self._template = template

    @property
    def template(self) -> MessageTemplate:
        return self._template

    def if_null(self, value: Any, *args: Any) -> TemplatedChecker:
        run_check(self._checker.strategy, rules.null, value, self._render(args))
        return self

    def if_not_null(self, value: Any, *args: Any) -> TemplatedChecker:
        run_check(self._checker.strategy, rules.not_null, value, self._render(args))
        return self

    def if_empty(self, value: Any, *args: Any) -> TemplatedChecker:
        run_check(self._checker.strategy, rules.empty, value, self._render(args))
        return self

    def if_not_empty(self, value: Any, *args: Any) -> TemplatedChecker:
        run_check(self._checker.strategy, rules.not_empty, value, self._render(args))
        return self

    def if_blank(self, value: str | None, *args: Any) -> TemplatedChecker:
        run_check(self._checker.strategy, rules.blank, value, self._render(args))
        return self

    def if_not_blank(self, value: str | None, *args: Any) -> TemplatedChecker:
        run_check(self._checker.strategy, rules.not_blank, value, self._render(args))
        return self

    def _render(self, args: tuple[Any, ...]) -> MessageSource:
        return lambda: self._template.render(args)


class CustomTemplatedChecker(TemplatedChecker):
    """Templated chain over a CustomChecker, with boolean checks."""

    def if_true(self, expr: bool, *args: Any) -> CustomTemplatedChecker:
        run_assertion(self._checker.strategy, bool(expr), self._render(args))
        return self

    def if_false(self, expr: bool, *args: Any) -> CustomTemplatedChecker:
        run_assertion(self._checker.strategy, not expr, self._render(args))
        return self
