"""Join Application Schemas - public submission and admin status review.

Invariants:
    - email is lower-cased after format validation
    - secondaryDepartment and the optional contact fields map "" to None
"""

from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from club_api.core.domain_types import AcademicYear, ApplicationStatus, Department
from club_api.schemas.base import PHONE_PATTERN, RequestSchema, blank_to_none


class JoinApplicationCreate(RequestSchema):
    first_name: str = Field(min_length=2, max_length=100)
    last_name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(pattern=PHONE_PATTERN)
    telegram_id: str | None = Field(None, max_length=100)
    discord_id: str | None = Field(None, max_length=100)
    home_address: str | None = Field(None, max_length=500)
    academic_year: AcademicYear
    field_of_study: str = Field(min_length=2, max_length=100)
    preferred_department: Department
    secondary_department: Department | None = None
    skills: str | None = Field(None, max_length=1000)
    motivation: str = Field(min_length=10, max_length=1000)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()

    @field_validator(
        "telegram_id", "discord_id", "home_address", "secondary_department", "skills",
        mode="before",
    )
    @classmethod
    def empty_as_none(cls, v):
        return blank_to_none(v)


class ApplicationStatusUpdate(RequestSchema):
    status: ApplicationStatus
    reviewed_by: UUID | None = None
