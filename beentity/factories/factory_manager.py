"""
Factory manager.

Maps the type names used in scenarios to entity factories. Types are
looked up in a registry first, then by naming convention in the
configured factory modules: a type ``User`` resolves to an attribute
``User`` or ``UserFactory`` of one of those modules.

Subclass and override ``create_factory`` for custom type mapping.
"""

import importlib
import inspect

import structlog

from beentity.core.config import settings
from beentity.core.constants import FACTORY_CLASS_SUFFIX
from beentity.core.exceptions import MissingFactoryError
from beentity.factories.base_factory import Factory
from beentity.factories.registry import FactoryConstructor, FactoryRegistry, default_registry
from beentity.interfaces.persistence_gateway import IPersistenceGateway

logger = structlog.get_logger(__name__)


class FactoryManager:
    """Creates a new entity factory for each requested type name."""

    def __init__(
        self,
        gateway: IPersistenceGateway,
        registry: FactoryRegistry | None = None,
        factory_modules: list[str] | None = None,
    ):
        """
        Initialize manager.
        :param gateway: Persistence gateway injected into every factory
        :param registry: Registry of type names, defaults to the global one
        :param factory_modules: Modules searched by naming convention
        """
        self.gateway = gateway
        self.registry = registry if registry is not None else default_registry
        self.factory_modules = factory_modules if factory_modules is not None else list(settings.factory_modules)

    def create_factory(self, type_name: str) -> Factory:
        """
        Create a new factory for an entity type.
        :param type_name: Human readable entity type, e.g. "User"
        :return: New factory instance, never shared between calls
        :raises MissingFactoryError: If no factory is defined for the type
        """
        factory_cls = self.resolve(type_name)
        factory = factory_cls(self.gateway, self)
        logger.debug("factory_created", type=type_name, factory=type(factory).__name__)
        return factory

    def resolve(self, type_name: str) -> FactoryConstructor:
        """Find the factory class for a type name without instantiating it."""
        factory_cls = self.registry.get(type_name)
        if factory_cls is not None:
            return factory_cls

        searched = ["registry"]
        for module_name in self.factory_modules:
            module = _import_factory_module(module_name)
            if module is None:
                searched.append(module_name)
                continue
            for attr in (type_name, type_name + FACTORY_CLASS_SUFFIX):
                searched.append(f"{module_name}.{attr}")
                candidate = getattr(module, attr, None)
                if _is_factory_class(candidate):
                    return candidate

        logger.warning("factory_missing", type=type_name, searched=searched)
        raise MissingFactoryError(type_name, searched)


def _is_factory_class(candidate) -> bool:
    return inspect.isclass(candidate) and issubclass(candidate, Factory) and not inspect.isabstract(candidate)


def _import_factory_module(module_name: str):
    """
    Import a configured factory module.
    :return: The module, or None if it does not exist
    :raises ModuleNotFoundError: If the module exists but one of its own imports is missing
    """
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        parts = module_name.split(".")
        missing = {".".join(parts[:i]) for i in range(1, len(parts) + 1)}
        if e.name not in missing:
            raise
        logger.warning("factory_module_missing", module=module_name)
        return None
