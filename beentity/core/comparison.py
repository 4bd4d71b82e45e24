"""
Equality rules used when asserting stored values against table cells.

Table cells arrive as text, so an exact comparison would never match a
boolean or numeric column. Text expectations are coerced according to
the type of the stored value. Anything not covered falls back to
comparing the stored value's string form.
"""

import enum
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from beentity.core.constants import FALSY_WORDS, NULL_WORDS, TRUTHY_WORDS


def parse_bool(text: str) -> bool | None:
    """Parse a yes/no style word, returning None when it is not one."""
    word = text.strip().lower()
    if word in TRUTHY_WORDS:
        return True
    if word in FALSY_WORDS:
        return False
    return None


def _text_matches(actual: Any, expected: str) -> bool:
    if actual is None:
        return expected.strip().lower() in NULL_WORDS

    # bool before int: bool is an int subclass
    if isinstance(actual, bool):
        return parse_bool(expected) is actual

    if isinstance(actual, (int, float, Decimal)):
        try:
            return Decimal(expected.strip()) == Decimal(str(actual))
        except InvalidOperation:
            return False

    if isinstance(actual, enum.Enum):
        return expected in (str(actual.value), actual.name)

    if isinstance(actual, (datetime, date)):
        return actual.isoformat() == expected.strip()

    return str(actual) == expected


def values_match(actual: Any, expected: Any, strict: bool = False) -> bool:
    """
    Compare a stored field value with an expected value.
    :param actual: Value read from the entity
    :param expected: Value from the scenario
    :param strict: Disable text coercion
    :return: True if the values are considered equal
    """
    if actual == expected:
        return True
    if strict or not isinstance(expected, str):
        return False
    return _text_matches(actual, expected)
