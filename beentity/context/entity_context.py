"""
Entity fixture context.

Defines the operations bound to scenario steps for provisioning and
checking entities. Create a persistence gateway for your application
and hand it to the context, for example::

    session = SessionLocal()
    context = EntityContext(SessionGateway(session))

    # Given a User entity "foo@bar.com" with password "secret"
    context.ensure_entity_with("User", "foo@bar.com", "password", "secret")

Step pattern matching is left to the host test framework.
"""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from beentity.core.config import settings
from beentity.core.exceptions import ExpectationError, UnexpectedEntityError
from beentity.factories.base_factory import Diff, Factory
from beentity.factories.factory_manager import FactoryManager
from beentity.interfaces.persistence_gateway import IPersistenceGateway

logger = structlog.get_logger(__name__)


def row_identifier(row: Mapping[str, Any]) -> Any:
    """The identifier of a table row is the value of its first column."""
    for value in row.values():
        return value
    raise ValueError("Table row has no columns to take an identifier from")


def describe_failure(type_name: str, identifier: str, result: Diff | None) -> str:
    """Human readable description of one failed row."""
    if result is None:
        return f"No {type_name} entity found for '{identifier}'"

    lines = [f"{type_name} entity '{identifier}' does not match:"]
    for field, mismatch in result.items():
        lines.append(f"  {field}: expected {mismatch.expected!r}, got {mismatch.actual!r}")
    return "\n".join(lines)


class EntityContext:
    """Orchestrates entity factories and commit timing for scenario steps."""

    def __init__(self, gateway: IPersistenceGateway, factory_manager: FactoryManager | None = None):
        """
        Initialize context.
        :param gateway: Persistence gateway used for loading and saving entities
        :param factory_manager: Optional manager, a default one is built when needed
        """
        self.gateway = gateway
        self.factory_manager = factory_manager

    def ensure_single_entity(self, type_name: str, identifier: str, fields: Mapping[str, Any] | None = None) -> Any:
        """
        Ensure an entity exists with the given fields, creating it if needed, and commit.
        :param type_name: Entity type
        :param identifier: Identifier mapped by the factory onto a unique field
        :param fields: Field values to set, other fields keep their values
        :return: The provided entity
        """
        factory = self.get_factory(type_name)
        entity = factory.provide(identifier, dict(fields or {}))
        self.gateway.flush()
        return entity

    def ensure_entity_with(self, type_name: str, identifier: str, field: str, value: Any) -> Any:
        """Ensure an entity exists with a single field set to a value."""
        return self.ensure_single_entity(type_name, identifier, {field: value})

    def ensure_entities_from_table(
        self,
        type_name: str,
        rows: Iterable[Mapping[str, Any]],
        purge_first: bool = False,
        per_row_commit: bool | None = None,
    ) -> list[Any]:
        """
        Ensure an entity exists for each table row.

        The first column of each row is the identifier. The full row,
        including that column, is applied as the field set. Missing
        entities are created and existing ones updated; fields not in
        the table are left alone.

        By default all rows are committed together once the table is
        processed, so a failing row leaves earlier rows staged but not
        committed. ``per_row_commit`` commits after every row instead.

        :param type_name: Entity type
        :param rows: Decoded table rows, each mapping header to cell value
        :param purge_first: Delete all entities of the type before provisioning
        :param per_row_commit: Commit per row, defaults to the configured setting
        :return: Provided entities in row order
        """
        if per_row_commit is None:
            per_row_commit = settings.per_row_commit

        factory = self.get_factory(type_name)
        if purge_first:
            factory.purge()
            logger.info("entities_purged", type=type_name)

        entities = []
        for row in rows:
            identifier = row_identifier(row)
            entities.append(factory.provide(identifier, dict(row)))
            if per_row_commit:
                self.gateway.flush()

        if not per_row_commit or not entities:
            self.gateway.flush()

        logger.info("entities_provided", type=type_name, count=len(entities), purged=purge_first)
        return entities

    def ensure_no_entity(self, type_name: str, identifier: str) -> None:
        """
        Check that no entity exists for the identifier. Fails rather than deleting.
        :raises UnexpectedEntityError: If the entity exists
        """
        factory = self.get_factory(type_name)
        self.gateway.clear()

        if factory.locate(identifier, required=False) is not None:
            raise UnexpectedEntityError(type_name, identifier)

    def assert_entities(self, type_name: str, rows: Iterable[Mapping[str, Any]]) -> None:
        """
        Check that an entity exists for each row with the listed field values.

        The gateway is cleared first so values are reloaded from storage.
        Every row is checked before failing.

        :raises ExpectationError: If any entity is missing or differs
        """
        factory = self.get_factory(type_name)
        self.gateway.clear()

        failures: dict[str, Diff | None] = {}
        messages = []
        for row in rows:
            identifier = row_identifier(row)
            result = factory.matches(identifier, dict(row))
            if result is True:
                continue

            failures[identifier] = result
            messages.append(describe_failure(type_name, identifier, result))

        if failures:
            logger.info("entity_expectation_failed", type=type_name, identifiers=list(failures))
            raise ExpectationError("\n".join(messages), failures)

    def assert_single_entity(self, type_name: str, identifier: str, fields: Mapping[str, Any] | None = None) -> None:
        """Check one entity exists with the listed field values."""
        factory = self.get_factory(type_name)
        self.gateway.clear()

        result = factory.matches(identifier, dict(fields or {}))
        if result is not True:
            raise ExpectationError(describe_failure(type_name, identifier, result), {identifier: result})

    def get_factory(self, type_name: str) -> Factory:
        """Get a new factory for the type from the factory manager."""
        return self.get_factory_manager().create_factory(type_name)

    def get_factory_manager(self) -> FactoryManager:
        """Get the factory manager, building a default one bound to the gateway if none was set."""
        if self.factory_manager is None:
            self.factory_manager = FactoryManager(self.gateway)
        return self.factory_manager

    def set_factory_manager(self, factory_manager: FactoryManager) -> None:
        """Use a custom factory manager for testing or custom type mapping."""
        self.factory_manager = factory_manager
