"""Failure strategy protocol."""

from __future__ import annotations

from typing import NoReturn, Protocol, runtime_checkable

from sims_util.core.enums import Category


@runtime_checkable
class IFailureStrategy(Protocol):
    """Decides which error a failed check raises.

    A strategy never returns: ``fail`` always raises an exception
    appropriate for ``category`` carrying ``message``.
    """

    def fail(self, category: Category, message: str) -> NoReturn:
        """Raise the error for a failed check."""
        ...
