"""Request Schema Base - shared Pydantic configuration for every request body.

Invariants:
    - Input keys are camelCase (alias_generator); snake_case names also accepted
    - Strings are whitespace-stripped before length/pattern checks
    - Unknown keys are dropped (extra="ignore")
    - Enum fields hold their string values after validation (use_enum_values)
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

PHONE_PATTERN = r"^[\+]?[1-9][\d]{0,15}$"
TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


class RequestSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
        use_enum_values=True,
    )


def blank_to_none(v: Any) -> Any:
    """Optional text/enum inputs treat "" as absent."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


def require_future(v: datetime | None) -> datetime | None:
    """Reject datetimes that are not after now (naive values are read as UTC)."""
    if v is None:
        return v
    aware = v if v.tzinfo is not None else v.replace(tzinfo=timezone.utc)
    if aware <= datetime.now(timezone.utc):
        raise ValueError("Date must be in the future")
    return aware
