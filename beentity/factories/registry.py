from collections.abc import Callable

import structlog

from beentity.factories.base_factory import Factory

logger = structlog.get_logger(__name__)

FactoryConstructor = Callable[..., Factory]


class FactoryRegistry:
    """Maps entity type names used in scenarios to factory classes."""

    def __init__(self):
        self._factories: dict[str, FactoryConstructor] = {}

    def register(self, type_name: str, factory_cls: FactoryConstructor) -> None:
        """
        Register a factory for a type name.
        :param type_name: Type name as written in scenarios
        :param factory_cls: Factory class or callable taking (gateway, manager)
        :raises ValueError: If the name is already bound to another factory
        """
        existing = self._factories.get(type_name)
        if existing is not None and existing is not factory_cls:
            raise ValueError(f"Entity type '{type_name}' is already registered to {existing!r}")

        self._factories[type_name] = factory_cls
        logger.debug("factory_registered", type=type_name, factory=getattr(factory_cls, "__name__", repr(factory_cls)))

    def factory(self, type_name: str):
        """Class decorator form of register."""

        def decorator(factory_cls):
            self.register(type_name, factory_cls)
            return factory_cls

        return decorator

    def get(self, type_name: str) -> FactoryConstructor | None:
        return self._factories.get(type_name)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._factories


default_registry = FactoryRegistry()


def register_factory(type_name: str):
    """Register a factory class in the default registry."""
    return default_registry.factory(type_name)
