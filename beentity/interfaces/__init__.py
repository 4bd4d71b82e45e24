"""
Interfaces for the collaborators the fixture layer depends on.
"""

from .persistence_gateway import IPersistenceGateway

__all__ = [
    "IPersistenceGateway",
]
