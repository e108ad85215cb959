"""Lazy printf-style failure messages."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# One ``%`` conversion: optional mapping key, flags, width, precision,
# length modifier and conversion character.
_SPECIFIER = re.compile(
    r"%(?P<key>\([^)]*\))?[#0\- +]*(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d*))?[hlL]?(?P<conversion>.)?",
    re.DOTALL,
)


def consumed_arguments(template: str) -> int | None:
    """Number of positional arguments ``template`` consumes.

    Returns None for mapping-key templates, which take no positional
    arguments at all.
    """
    count = 0
    for match in _SPECIFIER.finditer(template):
        if match.group("key") is not None:
            return None
        if match.group("conversion") == "%":
            continue
        count += 1
        if match.group("width") == "*":
            count += 1
        if match.group("precision") == "*":
            count += 1
    return count


@dataclass(frozen=True)
class MessageTemplate:
    """A ``%``-format string rendered only when a check fails.

    Arguments beyond those the template consumes are ignored. Rendering
    never raises: a malformed template, too few arguments, or an argument
    that cannot be converted produce an empty message.
    """

    template: str

    def render(self, args: tuple[Any, ...]) -> str:
        needed = consumed_arguments(self.template)
        if needed is not None:
            args = args[:needed]
        try:
            return self.template % args
        except Exception as exc:
            logger.debug("Cannot render message %r: %s", self.template, exc)
            return ""
