"""Failure strategies: standard error classes or a caller-supplied kind."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, NoReturn

from sims_util.core.enums import Category
from sims_util.core.errors import STANDARD_ERRORS

logger = logging.getLogger(__name__)

ErrorFactory = Callable[[str], BaseException]


@dataclass(frozen=True)
class StandardFailure:
    """Raise MissingValueError / InvalidValueError / FailedAssertionError."""

    def fail(self, category: Category, message: str) -> NoReturn:
        raise STANDARD_ERRORS[category](message)


@dataclass(frozen=True)
class CustomFailure:
    """Raise an error built by ``factory(message)``.

    ``factory`` is usually an exception class. When it is ``None``, when
    calling it raises, or when it returns something that is not an
    exception, the standard error for the category is raised instead.
    """

    factory: ErrorFactory | None = None

    def fail(self, category: Category, message: str) -> NoReturn:
        error = self._build(message)
        if error is None:
            StandardFailure().fail(category, message)
        raise error

    def _build(self, message: str) -> BaseException | None:
        if self.factory is None:
            return None
        try:
            error = self.factory(message)
        except Exception as exc:
            logger.debug(
                "Cannot build %r from message, using standard error: %s",
                self.factory, exc,
            )
            return None
        if not isinstance(error, BaseException):
            logger.debug(
                "%r returned %s, not an exception; using standard error",
                self.factory, type(error).__name__,
            )
            return None
        return error
