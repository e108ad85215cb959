"""Declarative argument checks.

    throw.if_null(value)
    throw.if_blank(name, "name is BLANK")
    throw.with_message("%s is NULL (need to call %s)").if_null(a, "a", "Jim")
    throw.exception(BadRequest).with_message("%s is missing").if_empty(b, "b")

Each function starts a fresh chain, runs the first check and returns the
chain so further checks can follow.
"""

from __future__ import annotations

from typing import Any

from .checker import Checker, CustomChecker, TemplatedChecker
from .strategy import ErrorFactory


# Prefixes

def exception(factory: ErrorFactory | None) -> CustomChecker:
    """Start a chain that raises ``factory(message)`` on failure."""
    return CustomChecker(factory)


def with_message(template: str) -> TemplatedChecker:
    """Start a chain whose checks fill ``template`` with their arguments."""
    return Checker().with_message(template)


# Checks

def if_null(value: Any, message: str | None = None) -> Checker:
    return Checker().if_null(value, message)


def if_not_null(value: Any, message: str | None = None) -> Checker:
    return Checker().if_not_null(value, message)


def if_empty(value: Any, message: str | None = None) -> Checker:
    return Checker().if_empty(value, message)


def if_not_empty(value: Any, message: str | None = None) -> Checker:
    return Checker().if_not_empty(value, message)


def if_blank(value: str | None, message: str | None = None) -> Checker:
    return Checker().if_blank(value, message)


def if_not_blank(value: str | None, message: str | None = None) -> Checker:
    return Checker().if_not_blank(value, message)
