"""Run a callback when a single condition holds.

Each helper calls ``callback(value)`` only when its condition is true and
a callback was given, and reports whether the callback ran.
"""

from __future__ import annotations

from typing import Callable, Optional

from sims_util.core.text import is_blank, is_empty

Callback = Optional[Callable[["str | None"], object]]


def _run(condition: bool, value: str | None, callback: Callback) -> bool:
    if callback is None or not condition:
        return False
    callback(value)
    return True


def if_not_null(value: str | None, callback: Callback) -> bool:
    return _run(value is not None, value, callback)


def if_null(value: str | None, callback: Callback) -> bool:
    return _run(value is None, value, callback)


def if_not_empty(value: str | None, callback: Callback) -> bool:
    return _run(not is_empty(value), value, callback)


def if_empty(value: str | None, callback: Callback) -> bool:
    return _run(is_empty(value), value, callback)


def if_not_blank(value: str | None, callback: Callback) -> bool:
    return _run(not is_blank(value), value, callback)


def if_blank(value: str | None, callback: Callback) -> bool:
    return _run(is_blank(value), value, callback)
