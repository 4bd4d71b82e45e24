"""
Unit test fixtures with mocked collaborators.

The gateway, manager and factories are Mocks specced on the real
interfaces, attached to one parent so call order can be asserted.
"""

from unittest.mock import Mock

import pytest

from beentity.core.config import settings
from beentity.factories import Factory, FactoryManager
from beentity.interfaces import IPersistenceGateway


@pytest.fixture
def call_log():
    """Parent mock recording calls across all collaborators in order."""
    return Mock()


@pytest.fixture
def mock_gateway(call_log):
    """Mock persistence gateway."""
    gateway = Mock(spec=IPersistenceGateway)
    gateway.find_one.return_value = None
    call_log.attach_mock(gateway, "gateway")
    return gateway


@pytest.fixture
def mock_factory(call_log):
    """Mock entity factory."""
    factory = Mock(spec=Factory)
    call_log.attach_mock(factory, "factory")
    return factory


@pytest.fixture
def mock_manager(mock_factory):
    """Mock factory manager returning mock_factory for every type."""
    manager = Mock(spec=FactoryManager)
    manager.create_factory.return_value = mock_factory
    return manager


@pytest.fixture
def strict_comparison(monkeypatch):
    """Switch on strict field comparison for one test."""
    monkeypatch.setattr(settings, "strict_comparison", True)
