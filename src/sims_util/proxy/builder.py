"""Fluent builder over an existing object.

    person = (
        BuilderProxy(Person())
        .set_name("Jack")
        .set_title("Architect")
        .build(IPerson)
    )

Any method of the target that returns ``None`` returns the builder
instead, so setters chain. ``build`` hands back a DelegatingProxy.
"""

from __future__ import annotations

import functools
from typing import Any

from .delegate import DelegatingProxy


class BuilderProxy:
    def __init__(self, target: Any) -> None:
        self._target = target

    @property
    def target(self) -> Any:
        return self._target

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._target, name)
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def fluent(*args: Any, **kwargs: Any) -> Any:
            result = attr(*args, **kwargs)
            return self if result is None else result

        return fluent

    def build(self, interface: type | None = None) -> DelegatingProxy:
        return DelegatingProxy(self._target, interface)
