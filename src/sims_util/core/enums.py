"""Enumerations used across sims-util."""

from enum import Enum


class Category(str, Enum):
    """Failure category of a validation check."""

    MISSING = "missing"
    INVALID = "invalid"
    ASSERTION = "assertion"


class GateState(str, Enum):
    ACTIVE = "active"
    INERT = "inert"  # Terminal, reached on the first failed predicate
