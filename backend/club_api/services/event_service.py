"""Event Service - event CRUD, registration with capacity control, registration roll-up.

Invariants:
    - New events start as status "draft" with is_active False
    - activation_date is stamped on the first activation only, never re-stamped
    - Registration runs in one transaction with the event row locked:
      404 (no event) -> 400 (not active) -> 409 (already registered) -> 400 (full)
    - Registered count never exceeds max_attendees when it is set
    - current_attendees is refreshed from the registered count on every registration
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from club_api.core import format_resources as fmt
from club_api.core.domain_types import Department, EventStatus, RegistrationStatus
from club_api.core.errors import (
    BusinessRuleError, ConflictError, DataAccessError, NotFoundError,
)
from club_api.core.filters import build_filters, enum_value, flag
from club_api.core.validation import validate
from club_api.infrastructure.data_access import DataAccess, OrderBy
from club_api.schemas.event import EventCreate, EventRegistrationCreate, EventUpdate
from club_api.services.listing import list_response
from club_api.services.references import require_user

logger = logging.getLogger(__name__)

EVENTS = "events"
REGISTRATIONS = "event_registrations"
ALREADY_REGISTERED = "Already registered for this event"


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class EventService:
    def __init__(self, data: DataAccess):
        self.data = data

    async def list_all(
        self,
        status: str | None,
        active: str | None,
        department: str | None,
        upcoming: str | None,
        page: int,
        limit: int,
    ) -> dict:
        filters = build_filters(
            is_active=True if flag(active) else None,
            status=enum_value(status, EventStatus),
            department=enum_value(department, Department),
        )
        rows = await self.data.query(
            EVENTS, filters=filters, order_by=OrderBy("event_date"),
        )
        if flag(upcoming):
            now = datetime.now(timezone.utc)
            rows = [r for r in rows if _as_utc(r["event_date"]) > now]
        return list_response(rows, page, limit, fmt.event)

    async def get(self, event_id: UUID) -> dict:
        row = await self._existing(event_id)
        registered = await self._registered_count(event_id)
        return {"success": True, "data": fmt.event(row, current_attendees=registered)}

    async def create(self, payload) -> dict:
        body = validate(EventCreate, payload)
        await require_user(self.data, body.created_by, "createdBy")
        record = body.to_record()
        record.update(
            created_by=body.created_by,
            status=EventStatus.DRAFT.value,
            is_active=False,
            current_attendees=0,
        )
        row = await self.data.insert(EVENTS, record)
        logger.info(
            f"New event created: {row['title']}", extra={"resource_id": str(row["id"])},
        )
        return {
            "success": True,
            "message": "Event created successfully",
            "data": fmt.event(row),
        }

    async def update(self, event_id: UUID, payload) -> dict:
        existing = await self._existing(event_id)
        body = validate(EventUpdate, payload)

        values = body.to_record()
        if body.status is not None:
            values["status"] = body.status
        if body.is_active is not None:
            values["is_active"] = body.is_active
            if body.is_active and existing["activation_date"] is None:
                values["activation_date"] = datetime.now(timezone.utc)

        row = await self.data.update(EVENTS, event_id, values)
        if row is None:
            raise NotFoundError("Event", str(event_id))
        if "activation_date" in values:
            logger.info(f"Event activated: {row['title']}", extra={"resource_id": str(event_id)})
        return {
            "success": True,
            "message": "Event updated successfully",
            "data": fmt.event(row),
        }

    async def delete(self, event_id: UUID) -> dict:
        existing = await self._existing(event_id)
        if not await self.data.delete(EVENTS, event_id):
            raise NotFoundError("Event", str(event_id))
        logger.info(
            f"Event deleted: {existing['title']}", extra={"resource_id": str(event_id)},
        )
        return {"success": True, "message": "Event deleted successfully"}

    async def register(self, event_id: UUID, payload) -> dict:
        body = validate(EventRegistrationCreate, payload)
        user_id = body.user_id

        async with self.data.transaction():
            event = await self.data.find_by_id(EVENTS, event_id, for_update=True)
            if event is None:
                raise NotFoundError("Event", str(event_id))
            if not event["is_active"]:
                raise BusinessRuleError(
                    "Event is not available for registration", "EVENT_NOT_ACTIVE",
                )
            await require_user(self.data, user_id, "userId")
            if await self.data.count(REGISTRATIONS, {"event_id": event_id, "user_id": user_id}):
                raise ConflictError(ALREADY_REGISTERED)

            registered = await self._registered_count(event_id)
            if event["max_attendees"] and registered >= event["max_attendees"]:
                raise BusinessRuleError("Event is full", "EVENT_FULL")

            try:
                row = await self.data.insert(REGISTRATIONS, {
                    "event_id": event_id,
                    "user_id": user_id,
                    "status": RegistrationStatus.REGISTERED.value,
                })
            except DataAccessError as e:
                if e.constraint_violation:
                    raise ConflictError(ALREADY_REGISTERED) from e
                raise
            await self.data.update(EVENTS, event_id, {"current_attendees": registered + 1})

        logger.info(
            f"User {user_id} registered for event {event['title']}",
            extra={"resource_id": str(event_id)},
        )
        return {
            "success": True,
            "message": "Successfully registered for event",
            "data": {
                "registrationId": row["id"],
                "eventId": event_id,
                "userId": user_id,
                "registeredAt": row["created_at"],
            },
        }

    async def registrations(self, event_id: UUID) -> dict:
        event = await self._existing(event_id)
        rows = await self.data.query(
            REGISTRATIONS,
            filters={"event_id": event_id},
            order_by=OrderBy("created_at", ascending=False),
        )
        counts = {"total": len(rows)}
        for status in RegistrationStatus:
            counts[status.value] = sum(1 for r in rows if r["status"] == status.value)
        return {
            "success": True,
            "event": {
                "id": event["id"],
                "title": event["title"],
                "maxAttendees": event["max_attendees"],
            },
            "registrations": counts,
            "data": [fmt.registration(r) for r in rows],
        }

    async def _existing(self, event_id: UUID) -> dict:
        row = await self.data.find_by_id(EVENTS, event_id)
        if row is None:
            raise NotFoundError("Event", str(event_id))
        return row

    async def _registered_count(self, event_id: UUID) -> int:
        return await self.data.count(
            REGISTRATIONS,
            {"event_id": event_id, "status": RegistrationStatus.REGISTERED.value},
        )
