"""
Integration test fixtures with SQLite in-memory.

Function-scoped engine for maximum isolation. StaticPool keeps the
in-memory database alive for every session opened during one test.
"""

import pytest

from beentity.context import EntityContext
from beentity.core.config import Settings
from beentity.core.database import Base, build_engine, build_sessionmaker, create_tables
from beentity.factories import FactoryManager
from beentity.repositories import SessionGateway
from tests.fixtures import registry
from tests.fixtures import models  # noqa: F401  registers tables on Base


@pytest.fixture
def engine():
    """SQLite in-memory engine with the example schema."""
    engine = build_engine(Settings(database_url="sqlite:///:memory:"))
    create_tables(engine, Base)

    yield engine

    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
def db_session(session_factory):
    """Session used by the code under test."""
    with session_factory() as session:
        yield session


@pytest.fixture
def gateway(db_session):
    return SessionGateway(db_session)


@pytest.fixture
def factory_manager(gateway):
    """Manager using the test registry plus naming convention lookup."""
    return FactoryManager(gateway, registry=registry, factory_modules=["tests.fixtures.factories"])


@pytest.fixture
def context(gateway, factory_manager):
    return EntityContext(gateway, factory_manager=factory_manager)


@pytest.fixture
def committed(db_session):
    """Query helper that discards staged work first, so only committed rows are seen."""

    def query(model, **criteria):
        db_session.rollback()
        db_session.expunge_all()
        return db_session.query(model).filter_by(**criteria).all()

    return query
