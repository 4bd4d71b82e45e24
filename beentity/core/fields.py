"""
Field access by naming convention.

A field named ``is_active`` in a scenario is written through
``set_is_active`` (or ``setIsActive``) when the entity defines one,
and otherwise assigned to a mapped column, relationship, property or
instance attribute. Other class attributes are never treated as fields.
Reads go through the matching getters.
"""

import inspect
import re
from typing import Any

from sqlalchemy import inspect as sa_inspect

from beentity.core.constants import GETTER_PREFIX, SETTER_PREFIX
from beentity.core.exceptions import UnknownFieldError

_SEPARATORS = re.compile(r"[\s\-]+")


def normalize_field_name(name: str) -> str:
    """Turn a table header such as ``is active`` into ``is_active``."""
    return _SEPARATORS.sub("_", name.strip())


def _camel(prefix: str, field: str) -> str:
    parts = field.split("_")
    return prefix.rstrip("_") + "".join(part[:1].upper() + part[1:] for part in parts if part)


def _find_method(entity: Any, prefix: str, field: str):
    for name in (prefix + field, _camel(prefix, field)):
        method = getattr(entity, name, None)
        if callable(method):
            return method
    return None


def _has_attribute(entity: Any, field: str) -> bool:
    """Only mapped attributes, properties and instance attributes count as fields."""
    if field.startswith("_"):
        return False

    mapper = sa_inspect(type(entity), raiseerr=False)
    if mapper is not None and field in mapper.all_orm_descriptors:
        return True

    if isinstance(inspect.getattr_static(type(entity), field, None), property):
        return True

    return field in getattr(entity, "__dict__", {})


def apply_field(entity: Any, name: str, value: Any) -> None:
    """
    Set one field on an entity.
    :param entity: Entity to modify
    :param name: Field name as written in the scenario
    :param value: Value to set
    :raises UnknownFieldError: If the entity has no way to set the field
    """
    field = normalize_field_name(name)
    setter = _find_method(entity, SETTER_PREFIX, field)
    if setter is not None:
        setter(value)
        return

    if _has_attribute(entity, field):
        setattr(entity, field, value)
        return

    raise UnknownFieldError(entity, field, "setter")


def read_field(entity: Any, name: str) -> Any:
    """
    Read one field from an entity.
    :param entity: Entity to read
    :param name: Field name as written in the scenario
    :return: Current value
    :raises UnknownFieldError: If the entity has no way to read the field
    """
    field = normalize_field_name(name)
    getter = _find_method(entity, GETTER_PREFIX, field)
    if getter is not None:
        return getter()

    if _has_attribute(entity, field):
        return getattr(entity, field)

    raise UnknownFieldError(entity, field, "getter")
