# tests/conftest.py
"""
Pytest configuration and fixtures for guidedtour tests.
"""

import logging

import pytest

from guidedtour.concurrency import wait_for_background


@pytest.fixture(autouse=True)
def cleanup_background_tasks():
    """Join stray background threads and reset logging around each test."""
    wait_for_background(timeout=5.0)

    yield

    wait_for_background(timeout=5.0)
    logging.getLogger("guidedtour").setLevel(logging.NOTSET)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: Slow tests that take significant time"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
