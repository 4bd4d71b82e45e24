"""
Test support for the beentity suite.

- models: example SQLAlchemy entities
- factories: example factories registered in a local registry
"""

from .factories import AuthorFactory, DummyFactory, ExampleFactory, PostFactory, registry

__all__ = [
    "AuthorFactory",
    "DummyFactory",
    "ExampleFactory",
    "PostFactory",
    "registry",
]
