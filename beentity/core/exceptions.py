"""
Exceptions raised by the fixture layer.

None of these are caught inside the package. They propagate to the
calling test step, which reports them as a failed scenario.
"""


class BeEntityError(Exception):
    """Base exception for all fixture layer failures."""

    error_code = "BEENTITY_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFactoryError(BeEntityError):
    """No factory can be resolved for an entity type name."""

    error_code = "MISSING_FACTORY"

    def __init__(self, type_name: str, searched: list[str] | None = None):
        message = f"No entity factory is defined for type '{type_name}'"
        if searched:
            message += f" (searched: {', '.join(searched)})"
        super().__init__(message)
        self.type_name = type_name
        self.searched = searched or []


class MissingEntityError(BeEntityError):
    """A factory could not locate an entity that was required."""

    error_code = "MISSING_ENTITY"

    def __init__(self, factory_name: str, identifier: str):
        super().__init__(f"{factory_name} could not locate an entity for '{identifier}'")
        self.factory_name = factory_name
        self.identifier = identifier


class UnexpectedEntityError(BeEntityError):
    """An entity exists that the scenario expected to be absent."""

    error_code = "UNEXPECTED_ENTITY"

    def __init__(self, type_name: str, identifier: str):
        super().__init__(f"Did not expect to find a '{type_name}' entity for '{identifier}'")
        self.type_name = type_name
        self.identifier = identifier


class ExpectationError(BeEntityError):
    """
    Stored entities do not match the expected values.

    ``failures`` maps each failing identifier to None when the entity
    was not found, or to its field diff when it exists but differs.
    """

    error_code = "EXPECTATION_FAILED"

    def __init__(self, message: str, failures: dict | None = None):
        super().__init__(message)
        self.failures = failures or {}


class UnknownFieldError(BeEntityError, AttributeError):
    """An entity has no setter, getter or attribute for a field name."""

    error_code = "UNKNOWN_FIELD"

    def __init__(self, entity, field: str, access: str):
        super().__init__(f"{type(entity).__name__} has no {access} for field '{field}'")
        self.field = field
