"""User Service - member directory, profile edits, provisioning, admin seeding.

Invariants:
    - password_hash is written here and never read back into a response
    - One user per email, compared case-insensitively; duplicates surface as ConflictError
    - Provisioned users start from DEFAULT_PROFILE; caller overrides win
    - seed_admin creates the configured administrator at most once

Design Decisions:
    - DEFAULT_PROFILE is a plain active member: provisioning never grants admin
      unless the caller asks for it explicitly
"""

import logging
from uuid import UUID

from club_api.core import format_resources as fmt
from club_api.core.domain_types import Department, UserRole
from club_api.core.errors import ConflictError, DataAccessError, NotFoundError
from club_api.core.filters import build_filters, enum_value, flag
from club_api.core.validation import validate
from club_api.infrastructure.data_access import DataAccess, OrderBy
from club_api.infrastructure.security import hash_password
from club_api.schemas.user import UserProvision, UserUpdate
from club_api.services.listing import list_response

logger = logging.getLogger(__name__)

TABLE = "users"
DUPLICATE_USER = "User with this email already exists"

DEFAULT_PROFILE = {
    "first_name": "New",
    "last_name": "Member",
    "phone": None,
    "telegram_id": None,
    "discord_id": None,
    "home_address": None,
    "student_id": None,
    "academic_year": None,
    "field_of_study": None,
    "role": UserRole.MEMBER.value,
    "department": None,
    "is_active": True,
}


class UserService:
    def __init__(self, data: DataAccess, bcrypt_rounds: int = 12):
        self.data = data
        self.bcrypt_rounds = bcrypt_rounds

    async def list_all(
        self,
        role: str | None,
        department: str | None,
        active: str | None,
        page: int,
        limit: int,
    ) -> dict:
        filters = build_filters(
            role=enum_value(role, UserRole),
            department=enum_value(department, Department),
            is_active=flag(active),
        )
        rows = await self.data.query(
            TABLE, filters=filters, order_by=OrderBy("created_at", ascending=False),
        )
        return list_response(rows, page, limit, fmt.user_summary)

    async def get(self, user_id: UUID) -> dict:
        return {"success": True, "data": fmt.user_detail(await self._existing(user_id))}

    async def update(self, user_id: UUID, payload) -> dict:
        await self._existing(user_id)
        body = validate(UserUpdate, payload)
        row = await self.data.update(TABLE, user_id, body.to_record())
        if row is None:
            raise NotFoundError("User", str(user_id))
        return {
            "success": True,
            "message": "User updated successfully",
            "data": fmt.user_detail(row),
        }

    async def provision(self, payload) -> dict:
        body = validate(UserProvision, payload)
        record = {**DEFAULT_PROFILE, **body.overrides(), "email": body.email}
        row = await self._create(record, body.password)
        logger.info(
            f"New user created: {row['email']} (role {row['role']})",
            extra={"resource_id": str(row["id"])},
        )
        return {
            "success": True,
            "message": "User created successfully",
            "data": fmt.user_summary(row),
        }

    async def seed_admin(
        self, email: str, password: str, first_name: str, last_name: str,
    ) -> dict:
        """Create the administrator account; ConflictError if the email is taken."""
        email = email.strip().lower()
        existing = await self.data.query(
            TABLE, filters={"email": email}, limit=1, ignore_case=("email",),
        )
        if existing:
            user = existing[0]
            raise ConflictError(
                "Admin user already exists",
                data={"id": user["id"], "email": user["email"], "role": user["role"]},
            )
        record = {
            **DEFAULT_PROFILE,
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "role": UserRole.ADMIN.value,
        }
        row = await self._create(record, password)
        logger.info(
            f"Admin user created: {row['email']}", extra={"resource_id": str(row["id"])},
        )
        return fmt.user_summary(row)

    async def _create(self, record: dict, password: str) -> dict:
        if await self.data.count(TABLE, {"email": record["email"]}, ignore_case=("email",)):
            raise ConflictError(DUPLICATE_USER)
        record["password_hash"] = hash_password(password, self.bcrypt_rounds)
        try:
            return await self.data.insert(TABLE, record)
        except DataAccessError as e:
            if e.constraint_violation:
                raise ConflictError(DUPLICATE_USER) from e
            raise

    async def _existing(self, user_id: UUID) -> dict:
        row = await self.data.find_by_id(TABLE, user_id)
        if row is None:
            raise NotFoundError("User", str(user_id))
        return row
