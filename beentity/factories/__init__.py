from .base_factory import Diff, Factory, FieldMismatch
from .factory_manager import FactoryManager
from .registry import FactoryRegistry, default_registry, register_factory

__all__ = [
    "Diff",
    "Factory",
    "FactoryManager",
    "FactoryRegistry",
    "FieldMismatch",
    "default_registry",
    "register_factory",
]
