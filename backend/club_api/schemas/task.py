"""Task Schemas - creation only; updates go through core/task_rules.py."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from club_api.core.domain_types import Department, TaskPriority
from club_api.schemas.base import RequestSchema, blank_to_none, require_future


class TaskCreate(RequestSchema):
    title: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=10, max_length=2000)
    priority: TaskPriority = TaskPriority.MEDIUM.value
    due_date: datetime | None = None
    category: str | None = Field(None, max_length=100)
    assigned_to: UUID
    assigned_by: UUID | None = None
    department: Department | None = None

    @field_validator("due_date")
    @classmethod
    def due_in_future(cls, v: datetime | None) -> datetime | None:
        return require_future(v)

    @field_validator("category", mode="before")
    @classmethod
    def empty_as_none(cls, v):
        return blank_to_none(v)
