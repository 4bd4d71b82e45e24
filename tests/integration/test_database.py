import pytest
from sqlalchemy import inspect

from beentity.core.config import Settings
from beentity.core.database import Base, build_engine, create_tables, drop_tables


@pytest.mark.integration
class TestDatabaseHelpers:
    def test_create_and_drop_tables(self):
        engine = build_engine(Settings(_env_file=None, database_url="sqlite:///:memory:"))

        create_tables(engine, Base)
        assert "dummies" in inspect(engine).get_table_names()

        drop_tables(engine, Base)
        assert inspect(engine).get_table_names() == []

        engine.dispose()