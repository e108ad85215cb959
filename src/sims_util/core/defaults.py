"""Default-value substitution helpers.

    not_blank(name, "anonymous")   # "anonymous" for None, "" or "  "
    for item in safe_list(maybe_items): ...
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from .text import is_blank, is_empty

T = TypeVar("T")


def not_null(value: T | None, default: T) -> T:
    return default if value is None else value


def not_empty(value: str | None, default: str) -> str:
    return default if is_empty(value) else value


def not_blank(value: str | None, default: str) -> str:
    return default if is_blank(value) else value


def safe_list(items: Iterable[T] | None) -> list[T]:
    """Return ``items`` as a list, or an empty list when absent."""
    if items is None:
        return []
    return list(items)
