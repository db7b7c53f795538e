"""Announcement Schemas - one body shape for create and update."""

from uuid import UUID

from pydantic import Field

from club_api.core.domain_types import Department, TargetAudience
from club_api.schemas.base import RequestSchema


class AnnouncementWrite(RequestSchema):
    title: str = Field(min_length=3, max_length=255)
    content: str = Field(min_length=10, max_length=2000)
    is_important: bool = False
    category: str = Field(min_length=2, max_length=100)
    target_audience: TargetAudience = TargetAudience.ALL.value
    target_department: Department | None = None
    author_id: UUID | None = None

    def to_record(self) -> dict:
        return {
            "title": self.title,
            "content": self.content,
            "is_important": self.is_important,
            "category": self.category,
            "target_audience": self.target_audience,
            "target_department": self.target_department,
        }
