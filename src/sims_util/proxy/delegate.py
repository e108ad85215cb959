"""Proxies that forward attribute access to a wrapped object."""

from __future__ import annotations

from typing import Any


def public_names(interface: type) -> frozenset[str]:
    """Public attribute names declared by ``interface`` and its bases."""
    return frozenset(name for name in dir(interface) if not name.startswith("_"))


class DelegatingProxy:
    """Forward every attribute lookup to ``target``.

    With an ``interface`` (a Protocol, ABC or plain class) only the public
    names it declares are reachable through the proxy, so callers cannot
    reach past the interface into the target's other members.
    """

    def __init__(self, target: Any, interface: type | None = None) -> None:
        object.__setattr__(self, "_target", target)
        object.__setattr__(
            self, "_allowed", public_names(interface) if interface is not None else None
        )

    def __getattr__(self, name: str) -> Any:
        self._require_allowed(name)
        return getattr(self._target, name)

    def __setattr__(self, name: str, value: Any) -> None:
        self._require_allowed(name)
        setattr(self._target, name, value)

    def __str__(self) -> str:
        return str(self._target)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"

    def _require_allowed(self, name: str) -> None:
        allowed = self._allowed
        if allowed is not None and name not in allowed:
            raise AttributeError(
                f"{name!r} is not part of the proxied interface"
            )
