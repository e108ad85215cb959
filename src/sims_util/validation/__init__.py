"""Validation chains: fluent argument checks raising typed errors.

Public API
----------
Entry points:
    throw (module: exception, with_message, if_null, if_not_null,
    if_empty, if_not_empty, if_blank, if_not_blank)

Chains:
    Checker, CustomChecker, TemplatedChecker, CustomTemplatedChecker

Strategies:
    IFailureStrategy, StandardFailure, CustomFailure

Messages:
    MessageTemplate
"""

from sims_util.validation import throw
from sims_util.validation.checker import (
    Checker,
    CustomChecker,
    CustomTemplatedChecker,
    TemplatedChecker,
)
from sims_util.validation.message import MessageTemplate
from sims_util.validation.protocol import IFailureStrategy
from sims_util.validation.strategy import CustomFailure, StandardFailure

__all__ = [
    # Entry points
    "throw",
    # Chains
    "Checker",
    "CustomChecker",
    "CustomTemplatedChecker",
    "TemplatedChecker",
    # Strategies
    "CustomFailure",
    "IFailureStrategy",
    "StandardFailure",
    # Messages
    "MessageTemplate",
]
