"""Copy-on-write proxy.

Writes through the proxy land in a shadow map instead of the original
object. Reads through the proxy see the shadow first::

    proxy = CopyOnWriteProxy(original)
    proxy.set_text("Texas")      # or: proxy.text = "Texas"
    proxy.get_text()             # "Texas"
    original.get_text()          # unchanged

Methods of the original keep running against the original's own state,
so ``str(proxy)`` still reflects the unmodified object.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_GET = "get_"
_SET = "set_"


class CopyOnWriteProxy:
    """Shadow writes to ``original`` without mutating it."""

    def __init__(self, original: Any) -> None:
        object.__setattr__(self, "_original", original)
        object.__setattr__(self, "_shadow", {})

    @property
    def shadowed(self) -> dict[str, Any]:
        """Copy of the attribute values written through the proxy."""
        return dict(self._shadow)

    def __getattr__(self, name: str) -> Any:
        shadow = self._shadow
        if name in shadow:
            return shadow[name]
        if name.startswith(_SET) and len(name) > len(_SET):
            return self._setter(name[len(_SET):])
        if name.startswith(_GET) and name[len(_GET):] in shadow:
            value = shadow[name[len(_GET):]]
            return lambda: value
        return getattr(self._original, name)

    def __setattr__(self, name: str, value: Any) -> None:
        logger.debug("Shadowing %s on %r", name, self._original)
        self._shadow[name] = value

    def __str__(self) -> str:
        return str(self._original)

    def __repr__(self) -> str:
        return f"CopyOnWriteProxy({self._original!r}, shadowed={sorted(self._shadow)})"

    def _setter(self, field: str):
        def set_value(value: Any) -> None:
            self.__setattr__(field, value)

        return set_value
