from .entity_context import EntityContext

__all__ = [
    "EntityContext",
]
