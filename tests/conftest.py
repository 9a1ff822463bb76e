"""Pytest configuration and fixtures."""

import logging

import pytest
import structlog

from bignumbers import Decimal

# Keep debug events from the library out of test output
structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
)


@pytest.fixture
def one() -> Decimal:
    """The integer one."""
    return Decimal.from_integer(1)


@pytest.fixture
def zero() -> Decimal:
    """Canonical zero."""
    return Decimal.from_integer(0)


@pytest.fixture
def five() -> Decimal:
    """The integer five."""
    return Decimal.from_integer(5)
