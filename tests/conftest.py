"""
Shared pytest fixtures for club-simulator tests.
"""

import logging
from pathlib import Path

import pytest

from clubsimulator import DayConfig, Instant


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def three_tables() -> DayConfig:
    """Three tables, open 09:00-19:00, 10 per started hour."""
    return DayConfig(
        table_count=3,
        opens_at=Instant.parse("09:00"),
        closes_at=Instant.parse("19:00"),
        hourly_rate=10,
    )


@pytest.fixture
def one_table() -> DayConfig:
    """A single table, open 09:00-19:00, 10 per started hour."""
    return DayConfig(
        table_count=1,
        opens_at=Instant.parse("09:00"),
        closes_at=Instant.parse("19:00"),
        hourly_rate=10,
    )


@pytest.fixture(autouse=True)
def reset_clubsimulator_logging():
    """Reset logging state before each test.

    Removes every handler except a NullHandler and lets the level inherit,
    so logging set up by one test does not leak into the next.
    """
    logger = logging.getLogger("clubsimulator")

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)

    yield

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
