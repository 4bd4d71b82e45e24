"""
Base entity factory.

Define one factory per entity type named in your scenarios. For a step
such as ``Given a User entity "foo@bar.com"`` you would register a
factory for ``User`` that maps the identifier onto the email field.

Several factories may build the same entity class with different
defaults, for example ``Administrator`` and ``User``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from beentity.core.comparison import values_match
from beentity.core.config import settings
from beentity.core.exceptions import MissingEntityError
from beentity.core.fields import apply_field, read_field
from beentity.interfaces.persistence_gateway import IPersistenceGateway

if TYPE_CHECKING:
    from beentity.factories.factory_manager import FactoryManager

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FieldMismatch:
    """Expected and actual value of one field that did not match."""

    expected: Any
    actual: Any


Diff = dict[str, FieldMismatch]


class Factory(ABC):
    """Shared locate/create/update logic for entity factories."""

    def __init__(self, gateway: IPersistenceGateway, factory_manager: FactoryManager):
        """
        Initialize factory with its collaborators.
        :param gateway: Persistence gateway used to find and stage entities
        :param factory_manager: Manager used to build factories for related entities
        """
        self.gateway = gateway
        self.factory_manager = factory_manager

    def provide(self, identifier: str, fields: Mapping[str, Any] | None = None) -> Any:
        """
        Ensure an entity exists for the identifier with the given fields set.

        Existing entities are updated, missing ones are created. Only the
        listed fields change. The entity is staged but not committed so
        callers can batch several entities into one commit.

        :param identifier: Identifier mapped by the factory onto a unique field
        :param fields: Field values overriding the current or default values
        :return: The located or created entity
        """
        fields = fields or {}
        entity = self.locate(identifier, required=False)

        if entity is None:
            return self.create(identifier, fields)

        self._ensure_values(entity, fields)
        logger.info("entity_updated", factory=self.name, identifier=identifier, fields=list(fields))
        return entity

    def locate(self, identifier: str, required: bool = False) -> Any | None:
        """
        Locate an entity by identifier.
        :param identifier: Identifier mapped by the factory onto a unique field
        :param required: Raise instead of returning None when nothing is found
        :return: The entity or None
        :raises MissingEntityError: If required and no entity exists
        """
        entity = self._locate(identifier)
        if required and entity is None:
            raise MissingEntityError(self.name, identifier)
        return entity

    def create(self, identifier: str, fields: Mapping[str, Any] | None = None) -> Any:
        """
        Create and stage a new entity, overriding factory defaults with fields.
        :param identifier: Identifier mapped by the factory onto a unique field
        :param fields: Field values overriding the defaults
        :return: The new entity
        """
        fields = fields or {}
        entity = self._create(identifier)
        self._ensure_values(entity, fields)
        logger.info("entity_created", factory=self.name, identifier=identifier, fields=list(fields))
        return entity

    def matches(self, identifier: str, fields: Mapping[str, Any] | None = None) -> bool | Diff | None:
        """
        Compare an entity's fields with expected values.

        Only listed fields are compared.

        :param identifier: Identifier of the entity to check
        :param fields: Expected field values
        :return: None if the entity does not exist, True if every field
            matches, otherwise a diff keyed by the mismatching field names
        """
        entity = self.locate(identifier, required=False)
        if entity is None:
            return None

        diff: Diff = {}
        for field, expected in (fields or {}).items():
            actual = read_field(entity, field)
            if not values_match(actual, expected, strict=settings.strict_comparison):
                diff[field] = FieldMismatch(expected=expected, actual=actual)

        return diff or True

    def get_factory(self, type_name: str) -> Factory:
        """Get a fresh factory for a related entity type."""
        return self.factory_manager.create_factory(type_name)

    @property
    def name(self) -> str:
        return type(self).__name__

    def _ensure_values(self, entity: Any, fields: Mapping[str, Any]) -> None:
        """Set each field through its setter, then stage the entity."""
        for field, value in fields.items():
            apply_field(entity, field, value)
        self.gateway.persist(entity)

    @abstractmethod
    def _locate(self, identifier: str) -> Any | None:
        """
        Find the entity for an identifier.
        :param identifier: Identifier from the scenario
        :return: The entity or None
        """
        pass

    @abstractmethod
    def _create(self, identifier: str) -> Any:
        """
        Build a new entity with defaults and the identifier field set.
        Do not persist it here; the caller stages it after applying fields.
        :param identifier: Identifier from the scenario
        :return: The unsaved entity
        """
        pass

    @abstractmethod
    def purge(self) -> None:
        """Delete every entity of the type managed by this factory."""
        pass
