"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the cattable test suite.
"""

import pytest

from cattable import CatTable, TableFactory

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.logging",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full system integration)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def factory() -> TableFactory:
    """
    Provide a factory with default configuration and no logger.

    Returns:
        TableFactory: Fresh factory
    """
    return TableFactory()


@pytest.fixture
def example_table(factory: TableFactory) -> CatTable:
    """
    Provide the table {a: 1, _b: {c: 2}} built with the default marker.

    Returns:
        CatTable: Root table with one category
    """
    return factory({"a": 1, "_b": {"c": 2}})
