"""
Entity fixtures for behaviour driven test suites.

Scenarios name an entity type and identifier; factories locate, create
or update the matching record and the context commits the result.
"""

from beentity.context import EntityContext
from beentity.core.exceptions import (
    BeEntityError,
    ExpectationError,
    MissingEntityError,
    MissingFactoryError,
    UnexpectedEntityError,
    UnknownFieldError,
)
from beentity.factories import Factory, FactoryManager, FactoryRegistry, FieldMismatch, register_factory
from beentity.interfaces import IPersistenceGateway
from beentity.repositories import SessionGateway

__all__ = [
    "BeEntityError",
    "EntityContext",
    "ExpectationError",
    "Factory",
    "FactoryManager",
    "FactoryRegistry",
    "FieldMismatch",
    "IPersistenceGateway",
    "MissingEntityError",
    "MissingFactoryError",
    "SessionGateway",
    "UnexpectedEntityError",
    "UnknownFieldError",
    "register_factory",
]
