"""Announcement Service - club-wide and department-targeted notices."""

import logging
from uuid import UUID

from club_api.core import format_resources as fmt
from club_api.core.domain_types import Department, TargetAudience
from club_api.core.errors import NotFoundError
from club_api.core.filters import build_filters, enum_value, flag
from club_api.core.validation import validate
from club_api.infrastructure.data_access import DataAccess, OrderBy
from club_api.schemas.announcement import AnnouncementWrite
from club_api.services.listing import list_response
from club_api.services.references import require_user

logger = logging.getLogger(__name__)

TABLE = "announcements"


class AnnouncementService:
    def __init__(self, data: DataAccess):
        self.data = data

    async def list_all(
        self,
        category: str | None,
        important: str | None,
        target_audience: str | None,
        department: str | None,
        page: int,
        limit: int,
    ) -> dict:
        filters = build_filters(
            category=category or None,
            is_important=True if flag(important) else None,
            target_audience=enum_value(target_audience, TargetAudience),
            target_department=enum_value(department, Department),
        )
        rows = await self.data.query(
            TABLE, filters=filters, order_by=OrderBy("created_at", ascending=False),
        )
        return list_response(rows, page, limit, fmt.announcement, with_pagination=False)

    async def get(self, announcement_id: UUID) -> dict:
        row = await self._existing(announcement_id)
        return {"success": True, "data": fmt.announcement(row)}

    async def create(self, payload) -> dict:
        body = validate(AnnouncementWrite, payload)
        await require_user(self.data, body.author_id, "authorId")
        record = body.to_record()
        record["author_id"] = body.author_id
        row = await self.data.insert(TABLE, record)
        logger.info(
            f"New announcement created: {row['title']}",
            extra={"resource_id": str(row["id"])},
        )
        return {
            "success": True,
            "message": "Announcement created successfully",
            "data": fmt.announcement(row),
        }

    async def update(self, announcement_id: UUID, payload) -> dict:
        await self._existing(announcement_id)
        body = validate(AnnouncementWrite, payload)
        row = await self.data.update(TABLE, announcement_id, body.to_record())
        if row is None:
            raise NotFoundError("Announcement", str(announcement_id))
        return {
            "success": True,
            "message": "Announcement updated successfully",
            "data": fmt.announcement(row),
        }

    async def delete(self, announcement_id: UUID) -> dict:
        existing = await self._existing(announcement_id)
        if not await self.data.delete(TABLE, announcement_id):
            raise NotFoundError("Announcement", str(announcement_id))
        logger.info(
            f"Announcement deleted: {existing['title']}",
            extra={"resource_id": str(announcement_id)},
        )
        return {"success": True, "message": "Announcement deleted successfully"}

    async def _existing(self, announcement_id: UUID) -> dict:
        row = await self.data.find_by_id(TABLE, announcement_id)
        if row is None:
            raise NotFoundError("Announcement", str(announcement_id))
        return row
