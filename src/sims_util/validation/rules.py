"""Check rules.

Each rule inspects a value and returns the failure ``Category`` when the
check fails, or ``None`` when it passes. Absence is always tested before
length or whitespace.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Callable, Optional

from sims_util.core.enums import Category
from sims_util.core.text import is_blank

Rule = Callable[[Any], Optional[Category]]


def null(value: Any) -> Category | None:
    return Category.MISSING if value is None else None


def not_null(value: Any) -> Category | None:
    return Category.INVALID if value is not None else None


def empty(value: Sized | None) -> Category | None:
    if value is None:
        return Category.MISSING
    if len(value) == 0:
        return Category.INVALID
    return None


def not_empty(value: Sized | None) -> Category | None:
    if value is not None and len(value) != 0:
        return Category.INVALID
    return None


def blank(value: str | None) -> Category | None:
    if value is None:
        return Category.MISSING
    if is_blank(value):
        return Category.INVALID
    return None


def not_blank(value: str | None) -> Category | None:
    return Category.INVALID if not is_blank(value) else None
