"""Event Schemas - creation, full update, and registration bodies.

Invariants:
    - eventDate must be in the future (create and update alike)
    - eventTime is 24h HH:MM
    - EventUpdate is the creation schema plus status and isActive
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, HttpUrl, field_validator

from club_api.core.domain_types import Department, EventDifficulty, EventStatus
from club_api.schemas.base import RequestSchema, TIME_PATTERN, blank_to_none, require_future


class EventCreate(RequestSchema):
    title: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=10, max_length=2000)
    event_date: datetime
    event_time: str = Field(pattern=TIME_PATTERN)
    location: str = Field(min_length=3, max_length=255)
    max_attendees: int | None = Field(None, ge=1, le=1000)
    category: str = Field(min_length=2, max_length=100)
    difficulty: EventDifficulty | None = None
    image_url: HttpUrl | None = None
    department: Department | None = None
    created_by: UUID | None = None

    @field_validator("event_date")
    @classmethod
    def event_in_future(cls, v: datetime) -> datetime:
        return require_future(v)

    @field_validator("difficulty", "image_url", mode="before")
    @classmethod
    def empty_as_none(cls, v):
        return blank_to_none(v)

    def to_record(self) -> dict:
        """Storage columns shared by create and update."""
        return {
            "title": self.title,
            "description": self.description,
            "event_date": self.event_date,
            "event_time": self.event_time,
            "location": self.location,
            "max_attendees": self.max_attendees,
            "category": self.category,
            "difficulty": self.difficulty,
            "image_url": str(self.image_url) if self.image_url else None,
            "department": self.department,
        }


class EventUpdate(EventCreate):
    status: EventStatus | None = None
    is_active: bool | None = None


class EventRegistrationCreate(RequestSchema):
    user_id: UUID
