"""List Filters - turn raw query-string values into column-equality filters.

Invariants:
    - Enumerated filters only pass values that belong to their enum (domain_types.py)
    - Values outside the enum are dropped, not rejected: the list is returned unfiltered
    - Boolean filters accept only the literal strings "true" / "false"
"""

from enum import Enum
from typing import Any


def enum_value(raw: str | None, enum: type[Enum]) -> str | None:
    """Return raw if it is a member value of enum, else None."""
    if raw is None:
        return None
    allowed = {member.value for member in enum}
    return raw if raw in allowed else None


def flag(raw: str | None) -> bool | None:
    """Parse "true"/"false" query flags; anything else means "not filtered"."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def build_filters(**candidates: Any) -> dict[str, Any]:
    """Keep only the filters that resolved to a value."""
    return {column: value for column, value in candidates.items() if value is not None}
