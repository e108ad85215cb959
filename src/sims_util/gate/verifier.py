"""Predicate-gated execution.

``when(value)`` starts a chain of predicate checks. The callback given to
``then`` runs only if every check held::

    (
        when(token)
        .is_not_blank()
        .is_not_equal_to(REVOKED)
        .matches(lambda t: t.startswith("tk_"))
        .then(authorize)
    )

The chain is a two-state machine. ``Active`` holds the value and keeps
evaluating. The first failing predicate returns ``INERT``, a stateless
sink on which every operation is a no-op, so later predicates are never
evaluated and the callback never runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol, TypeVar, Union, runtime_checkable

from sims_util.core.enums import GateState
from sims_util.core.text import is_blank, is_empty

logger = logging.getLogger(__name__)

R = TypeVar("R")
Predicate = Callable[["str | None"], bool]


@runtime_checkable
class IGate(Protocol):
    """Operations shared by both gate states."""

    @property
    def state(self) -> GateState: ...

    def is_null(self) -> IGate: ...
    def is_not_null(self) -> IGate: ...
    def is_empty(self) -> IGate: ...
    def is_not_empty(self) -> IGate: ...
    def is_blank(self) -> IGate: ...
    def is_not_blank(self) -> IGate: ...
    def is_equal_to(self, target: str | None) -> IGate: ...
    def is_not_equal_to(self, target: str | None) -> IGate: ...
    def matches(self, predicate: Predicate) -> IGate: ...
    def does_not_match(self, predicate: Predicate) -> IGate: ...
    def then(self, callback: Callable[[str | None], R]) -> R | None: ...


@dataclass(frozen=True)
class Active:
    """Gate still passing: holds the value under test."""

    value: str | None

    @property
    def state(self) -> GateState:
        return GateState.ACTIVE

    def is_null(self) -> Gate:
        return self._keep_if(self.value is None)

    def is_not_null(self) -> Gate:
        return self._keep_if(self.value is not None)

    def is_empty(self) -> Gate:
        return self._keep_if(is_empty(self.value))

    def is_not_empty(self) -> Gate:
        return self._keep_if(not is_empty(self.value))

    def is_blank(self) -> Gate:
        return self._keep_if(is_blank(self.value))

    def is_not_blank(self) -> Gate:
        return self._keep_if(not is_blank(self.value))

    def is_equal_to(self, target: str | None) -> Gate:
        return self._keep_if(
            self.value is target or (target is not None and target == self.value)
        )

    def is_not_equal_to(self, target: str | None) -> Gate:
        # Identity OR content difference: two distinct but equal objects
        # count as "not equal".
        return self._keep_if(
            self.value is not target or (target is not None and target != self.value)
        )

    def matches(self, predicate: Predicate) -> Gate:
        return self._keep_if(bool(predicate(self.value)))

    def does_not_match(self, predicate: Predicate) -> Gate:
        return self._keep_if(not predicate(self.value))

    def then(self, callback: Callable[[str | None], R]) -> R | None:
        return callback(self.value)

    def _keep_if(self, holds: bool) -> Gate:
        if holds:
            return self
        logger.debug("Predicate failed for %r, gate is now inert", self.value)
        return INERT


class Inert:
    """Gate that failed a predicate. Every operation is a no-op."""

    __slots__ = ()

    @property
    def state(self) -> GateState:
        return GateState.INERT

    def is_null(self) -> Inert:
        return self

    def is_not_null(self) -> Inert:
        return self

    def is_empty(self) -> Inert:
        return self

    def is_not_empty(self) -> Inert:
        return self

    def is_blank(self) -> Inert:
        return self

    def is_not_blank(self) -> Inert:
        return self

    def is_equal_to(self, target: str | None) -> Inert:
        return self

    def is_not_equal_to(self, target: str | None) -> Inert:
        return self

    def matches(self, predicate: Predicate) -> Inert:
        return self

    def does_not_match(self, predicate: Predicate) -> Inert:
        return self

    def then(self, callback: Callable[[str | None], Any]) -> None:
        return None

    def __repr__(self) -> str:
        return "INERT"


INERT = Inert()

Gate = Union[Active, Inert]


def when(value: str | None) -> Active:
    """Start a predicate chain over ``value``."""
    return Active(value)
