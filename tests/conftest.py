"""Shared fixtures for the sims-util test suite."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
import structlog


# ---------------------------------------------------------------------------
# Error kinds used with custom failure strategies
# ---------------------------------------------------------------------------

class BadStringOperation(Exception):
    """Constructible from a single message."""


class NeedsCode(Exception):
    """Cannot be built from a message alone."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message)


@pytest.fixture
def one_arg_error() -> type[Exception]:
    return BadStringOperation


@pytest.fixture
def two_arg_error() -> type[Exception]:
    return NeedsCode


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------

@pytest.fixture
def callback() -> MagicMock:
    """A callback that records how it was invoked."""
    return MagicMock(name="callback", return_value="called")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def restore_logging():
    """Undo any logging configuration a test installs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
