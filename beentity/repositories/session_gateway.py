from collections.abc import Mapping
from typing import Any

import structlog
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from beentity.interfaces.persistence_gateway import IPersistenceGateway

logger = structlog.get_logger(__name__)


class SessionGateway(IPersistenceGateway):
    """SQLAlchemy session implementation of the persistence gateway."""

    def __init__(self, db: Session):
        """
        Initialize with database session.
        :param db: SQLAlchemy database session
        """
        self.db = db

    def find_one(self, entity_type: type, criteria: Mapping[str, Any]) -> Any | None:
        """Find a single entity matching the criteria."""
        query = select(entity_type).filter_by(**criteria)
        result = self.db.execute(query)
        return result.scalar_one_or_none()

    def persist(self, entity: Any) -> None:
        """Add entity to the session without committing."""
        self.db.add(entity)

    def flush(self) -> None:
        """Commit pending changes."""
        pending = len(self.db.new) + len(self.db.dirty)
        self.db.commit()
        logger.debug("gateway_committed", pending=pending)

    def clear(self) -> None:
        """Detach all loaded entities from the session."""
        self.db.expunge_all()
        logger.debug("gateway_cleared")

    def delete_all(self, entity_type: type) -> int:
        """Delete all rows of an entity type."""
        result = self.db.execute(delete(entity_type))
        logger.debug("gateway_purged", entity_type=entity_type.__name__, rows=result.rowcount)
        return result.rowcount
