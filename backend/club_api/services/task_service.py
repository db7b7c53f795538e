"""Task Service - task assignment and progress tracking.

Invariants:
    - New tasks start "pending" with progress 0
    - Updates go through core.task_rules.build_task_update (allow-list + completion rule)
    - Task lists carry count/total but no pagination block
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from club_api.core import format_resources as fmt
from club_api.core.domain_types import Department, TaskPriority, TaskStatus
from club_api.core.errors import NotFoundError
from club_api.core.filters import build_filters, enum_value
from club_api.core.task_rules import build_task_update
from club_api.core.validation import validate
from club_api.infrastructure.data_access import DataAccess, OrderBy
from club_api.schemas.task import TaskCreate
from club_api.services.listing import list_response
from club_api.services.references import require_user

logger = logging.getLogger(__name__)

TABLE = "tasks"


class TaskService:
    def __init__(self, data: DataAccess):
        self.data = data

    async def list_all(
        self,
        assigned_to: UUID | None,
        assigned_by: UUID | None,
        status: str | None,
        priority: str | None,
        department: str | None,
        page: int,
        limit: int,
    ) -> dict:
        filters = build_filters(
            assigned_to=assigned_to,
            assigned_by=assigned_by,
            status=enum_value(status, TaskStatus),
            priority=enum_value(priority, TaskPriority),
            department=enum_value(department, Department),
        )
        rows = await self.data.query(
            TABLE, filters=filters, order_by=OrderBy("created_at", ascending=False),
        )
        return list_response(rows, page, limit, fmt.task, with_pagination=False)

    async def get(self, task_id: UUID) -> dict:
        return {"success": True, "data": fmt.task(await self._existing(task_id))}

    async def create(self, payload) -> dict:
        body = validate(TaskCreate, payload)
        await require_user(self.data, body.assigned_to, "assignedTo")
        await require_user(self.data, body.assigned_by, "assignedBy")

        record = body.model_dump()
        record.update(
            status=TaskStatus.PENDING.value,
            progress=0,
            assigned_date=datetime.now(timezone.utc),
        )
        row = await self.data.insert(TABLE, record)
        logger.info(
            f"New task created: {row['title']}", extra={"resource_id": str(row["id"])},
        )
        return {
            "success": True,
            "message": "Task created successfully",
            "data": fmt.task(row),
        }

    async def update(self, task_id: UUID, payload) -> dict:
        existing = await self._existing(task_id)
        body = payload if isinstance(payload, dict) else {}
        values = build_task_update(existing, body, datetime.now(timezone.utc))

        row = await self.data.update(TABLE, task_id, values)
        if row is None:
            raise NotFoundError("Task", str(task_id))
        if values.get("status") and values["status"] != existing["status"]:
            logger.info(
                f"Task status changed: {existing['status']} -> {row['status']}",
                extra={"resource_id": str(task_id)},
            )
        return {
            "success": True,
            "message": "Task updated successfully",
            "data": fmt.task(row),
        }

    async def delete(self, task_id: UUID) -> dict:
        existing = await self._existing(task_id)
        if not await self.data.delete(TABLE, task_id):
            raise NotFoundError("Task", str(task_id))
        logger.info(
            f"Task deleted: {existing['title']}", extra={"resource_id": str(task_id)},
        )
        return {"success": True, "message": "Task deleted successfully"}

    async def _existing(self, task_id: UUID) -> dict:
        row = await self.data.find_by_id(TABLE, task_id)
        if row is None:
            raise NotFoundError("Task", str(task_id))
        return row
