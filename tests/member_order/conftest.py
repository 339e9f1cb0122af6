"""Pytest configuration for member order tests."""

import logging
from collections.abc import Generator

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that parse real TypeScript sources",
    )


@pytest.fixture(autouse=True)
def isolate_logging() -> Generator[None, None, None]:
    """Restore the member_order logger after tests that reconfigure logging.

    setup_logging() applies dictConfig, which replaces handlers globally and
    would otherwise leak handlers bound to captured streams between tests.
    """
    package_logger = logging.getLogger("member_order")
    root_logger = logging.getLogger()
    saved = (
        list(package_logger.handlers),
        package_logger.level,
        package_logger.propagate,
        list(root_logger.handlers),
        root_logger.level,
    )

    yield

    package_logger.handlers[:] = saved[0]
    package_logger.setLevel(saved[1])
    package_logger.propagate = saved[2]
    root_logger.handlers[:] = saved[3]
    root_logger.setLevel(saved[4])
