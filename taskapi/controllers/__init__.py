"""Resource Controllers — create and query operations against the ORM models.

Invariants:
    - Controllers receive the session explicitly (no global connection state)
    - Driver errors leave a controller only as TaskApiError subclasses
    - Controllers never build HTTP responses
"""

from collections.abc import Mapping


def field_value(data, name: str):
    """Read `name` from a request model or a plain mapping."""
    if isinstance(data, Mapping):
        return data.get(name)
    return getattr(data, name, None)
