import structlog
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from beentity.core.config import Settings, settings

logger = structlog.get_logger(__name__)

Base = declarative_base()


def build_engine(config: Settings = settings) -> Engine:
    """
    Create a database engine for fixture provisioning.
    In-memory SQLite shares one connection so every session sees the same data.
    :param config: Settings holding the database URL
    :return: SQLAlchemy engine
    """
    if config.database_url.startswith("sqlite"):
        engine = create_engine(
            config.database_url,
            poolclass=StaticPool,
            echo=config.debug,
            connect_args={"check_same_thread": False},
        )

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(config.database_url, pool_pre_ping=True, pool_recycle=3600, echo=config.debug)


def build_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    """
    Session factory for gateways.
    Autoflush keeps staged entities visible to lookups inside the open
    transaction. Nothing is committed until the gateway is flushed.
    """
    return sessionmaker(bind=engine, autoflush=True, expire_on_commit=False)


def create_tables(engine: Engine, base=Base) -> None:
    """Create all tables registered on the declarative base"""
    base.metadata.create_all(bind=engine)
    logger.info("tables_created", count=len(base.metadata.tables))


def drop_tables(engine: Engine, base=Base) -> None:
    """Drop all tables registered on the declarative base"""
    try:
        base.metadata.drop_all(bind=engine, checkfirst=True)
    except (IntegrityError, OperationalError) as e:
        logger.warning("drop_tables_retry_with_reflection", error=str(e))
        base.metadata.reflect(bind=engine)
        base.metadata.drop_all(bind=engine)

    logger.info("tables_dropped")
