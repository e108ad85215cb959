"""Custom exception hierarchy for sims-util."""

from .enums import Category


class SimsUtilError(Exception):
    """Base exception for all sims-util errors."""


# --- Configuration ---
class ConfigError(SimsUtilError):
    """Invalid or unreadable configuration."""


# --- Checks ---
class CheckError(SimsUtilError):
    """A validation check failed.

    ``category`` tells callers which kind of failure occurred without
    having to know the concrete subclass.
    """

    category: Category

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class MissingValueError(CheckError, ValueError):
    """A value was required but is absent."""

    category = Category.MISSING


class InvalidValueError(CheckError, ValueError):
    """A value is present but violates a shape constraint."""

    category = Category.INVALID


class FailedAssertionError(CheckError, AssertionError):
    """A boolean expectation was violated."""

    category = Category.ASSERTION


STANDARD_ERRORS: dict[Category, type[CheckError]] = {
    Category.MISSING: MissingValueError,
    Category.INVALID: InvalidValueError,
    Category.ASSERTION: FailedAssertionError,
}
