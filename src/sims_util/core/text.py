"""Null/empty/blank predicates shared by the checks and the gate."""

from __future__ import annotations

from collections.abc import Sized


def is_empty(value: Sized | None) -> bool:
    """True for ``None`` or a zero-length value."""
    return value is None or len(value) == 0


def is_blank(value: str | None) -> bool:
    """True for ``None`` or a string made only of whitespace.

    Whitespace follows ``str.isspace`` (Unicode), so the empty string is
    blank too.
    """
    if value is None:
        return True
    return all(ch.isspace() for ch in value)
