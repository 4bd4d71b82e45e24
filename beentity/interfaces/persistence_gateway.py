"""
Persistence gateway interface.

The fixture layer never queries a database directly. Factories read and
stage entities through this small contract, and the fixture context
decides when staged changes are committed. Implementations are expected
to behave as a unit of work: persisted entities stay pending until
``flush`` is called.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class IPersistenceGateway(ABC):
    """Abstract interface for the storage used by entity factories."""

    @abstractmethod
    def find_one(self, entity_type: type, criteria: Mapping[str, Any]) -> Any | None:
        """
        Find a single entity of a type matching every criterion.

        Args:
            entity_type: Mapped entity class
            criteria: Field name to value mapping

        Returns:
            The entity, or None if nothing matches
        """
        pass

    @abstractmethod
    def persist(self, entity: Any) -> None:
        """
        Stage an entity for the next commit without writing it yet.

        Args:
            entity: New or modified entity
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Commit every staged change."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget cached entities so later reads load committed state."""
        pass

    @abstractmethod
    def delete_all(self, entity_type: type) -> int:
        """
        Delete every stored entity of a type.

        Args:
            entity_type: Mapped entity class

        Returns:
            Number of deleted rows
        """
        pass
