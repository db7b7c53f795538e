"""Join Application Service - public membership applications and admin review.

Invariants:
    - One application per email, and no application for an email that already has a user
    - Email comparisons ignore case: stored rows may predate lower-casing
    - New applications always start "pending"
    - A status change always stamps reviewed_at
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from club_api.core import format_resources as fmt
from club_api.core.domain_types import ApplicationStatus
from club_api.core.errors import ConflictError, DataAccessError, NotFoundError
from club_api.core.filters import build_filters, enum_value
from club_api.core.validation import validate
from club_api.infrastructure.data_access import DataAccess, OrderBy
from club_api.schemas.join_application import ApplicationStatusUpdate, JoinApplicationCreate
from club_api.services.listing import list_response
from club_api.services.references import require_user

logger = logging.getLogger(__name__)

TABLE = "join_applications"
DUPLICATE_APPLICATION = "An application with this email already exists"


class JoinApplicationService:
    def __init__(self, data: DataAccess):
        self.data = data

    async def submit(self, payload) -> dict:
        body = validate(JoinApplicationCreate, payload)

        email = {"email": body.email}
        if await self.data.count(TABLE, email, ignore_case=("email",)):
            raise ConflictError(DUPLICATE_APPLICATION)
        if await self.data.count("users", email, ignore_case=("email",)):
            raise ConflictError("A user with this email already exists")

        record = body.model_dump()
        record["status"] = ApplicationStatus.PENDING.value
        try:
            row = await self.data.insert(TABLE, record)
        except DataAccessError as e:
            if e.constraint_violation:
                raise ConflictError(DUPLICATE_APPLICATION) from e
            raise

        logger.info(
            f"New join application submitted: {row['email']}",
            extra={"resource_id": str(row["id"])},
        )
        return {
            "success": True,
            "message": "Application submitted successfully",
            "data": {
                "id": row["id"],
                "email": row["email"],
                "status": row["status"],
                "submittedAt": row["created_at"],
            },
        }

    async def list_all(self, status: str | None, page: int, limit: int) -> dict:
        rows = await self.data.query(
            TABLE,
            filters=build_filters(status=enum_value(status, ApplicationStatus)),
            order_by=OrderBy("created_at", ascending=False),
        )
        return list_response(rows, page, limit, fmt.application_summary)

    async def get(self, application_id: UUID) -> dict:
        row = await self.data.find_by_id(TABLE, application_id)
        if row is None:
            raise NotFoundError("Application", str(application_id))
        return {"success": True, "data": fmt.application_detail(row)}

    async def update_status(self, application_id: UUID, payload) -> dict:
        body = validate(ApplicationStatusUpdate, payload)
        if await self.data.find_by_id(TABLE, application_id) is None:
            raise NotFoundError("Application", str(application_id))
        await require_user(self.data, body.reviewed_by, "reviewedBy")

        values = {"status": body.status, "reviewed_at": datetime.now(timezone.utc)}
        if body.reviewed_by is not None:
            values["reviewed_by"] = body.reviewed_by
        row = await self.data.update(TABLE, application_id, values)
        if row is None:
            raise NotFoundError("Application", str(application_id))

        logger.info(
            f"Application status updated to {row['status']}",
            extra={"resource_id": str(row["id"])},
        )
        return {
            "success": True,
            "message": f"Application status updated to {row['status']}",
            "data": {
                "id": row["id"],
                "status": row["status"],
                "reviewedAt": row["reviewed_at"],
            },
        }
