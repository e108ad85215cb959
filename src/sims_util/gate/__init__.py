"""Conditional execution: predicate-gated chains and single-condition helpers."""

from sims_util.gate import only_if
from sims_util.gate.verifier import INERT, Active, Gate, IGate, Inert, when

__all__ = [
    "INERT",
    "Active",
    "Gate",
    "IGate",
    "Inert",
    "only_if",
    "when",
]
