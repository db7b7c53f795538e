"""User References - existence checks for user ids carried in request bodies."""

from uuid import UUID

from club_api.core.errors import FieldError, ValidationError
from club_api.infrastructure.data_access import DataAccess


async def require_user(data: DataAccess, user_id: UUID | None, field: str) -> None:
    """Raise ValidationError on `field` when user_id is set but no such user exists."""
    if user_id is None:
        return
    if await data.find_by_id("users", user_id) is None:
        raise ValidationError([FieldError(field, "User not found")])
