"""sims-util: fluent argument checks, predicate gates and small helpers.

    from sims_util import throw, when

    throw.with_message("%s is required").if_blank(name, "name")
    when(token).is_not_blank().then(authorize)
"""

from sims_util.core.defaults import not_blank, not_empty, not_null, safe_list
from sims_util.core.elapsed import ElapsedTime, format_elapsed
from sims_util.core.enums import Category, GateState
from sims_util.core.errors import (
    CheckError,
    ConfigError,
    FailedAssertionError,
    InvalidValueError,
    MissingValueError,
    SimsUtilError,
)
from sims_util.core.text import is_blank, is_empty
from sims_util.gate import INERT, only_if, when
from sims_util.validation import throw

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "only_if",
    "throw",
    "when",
    "INERT",
    # Helpers
    "ElapsedTime",
    "format_elapsed",
    "is_blank",
    "is_empty",
    "not_blank",
    "not_empty",
    "not_null",
    "safe_list",
    # Enums
    "Category",
    "GateState",
    # Errors
    "CheckError",
    "ConfigError",
    "FailedAssertionError",
    "InvalidValueError",
    "MissingValueError",
    "SimsUtilError",
]
