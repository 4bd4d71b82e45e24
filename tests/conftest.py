"""
Global test configuration and fixtures.

Test-specific fixtures are located in their respective conftest.py files:
- tests/unit/conftest.py - Unit test fixtures with mocked collaborators
- tests/integration/conftest.py - Integration test fixtures with SQLite
"""

import pytest


# Global sample data fixtures (no database dependencies)
@pytest.fixture
def sample_dummy_rows():
    """Table rows as decoded from a scenario, first column is the identifier."""
    return [
        {"title": "This is title 1", "active": "yes", "custom": "other1"},
        {"title": "This is title 2", "active": "yes", "custom": "other2"},
        {"title": "This is title 3", "active": "no", "custom": "other3"},
    ]


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies (fast)")
    config.addinivalue_line("markers", "integration: Integration tests with a real SQLite database")


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
