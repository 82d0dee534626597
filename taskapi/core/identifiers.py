"""Identifiers — structural checks for record ids and user references.

Invariants:
    - Identifiers are UUIDs; any other shape is rejected before a query runs
    - Only structure is checked, never existence
"""

from typing import NewType
from uuid import UUID

from taskapi.core.errors import InvalidIdentifierError

UserId = NewType("UserId", UUID)


def parse_identifier(value: object, field: str = "id") -> UUID:
    """Coerce value to a UUID or raise InvalidIdentifierError."""
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        raise InvalidIdentifierError(value, field)
    try:
        return UUID(value)
    except ValueError:
        raise InvalidIdentifierError(value, field) from None
