"""User Schemas - profile update allow-list and admin provisioning.

Invariants:
    - UserUpdate only exposes self-editable profile fields (no role, no email)
    - UserProvision overrides are merged onto DEFAULT_PROFILE (services/user_service.py)
"""

from pydantic import EmailStr, Field, field_validator

from club_api.core.domain_types import AcademicYear, Department, UserRole
from club_api.schemas.base import PHONE_PATTERN, RequestSchema


class UserUpdate(RequestSchema):
    first_name: str | None = Field(None, min_length=2, max_length=100)
    last_name: str | None = Field(None, min_length=2, max_length=100)
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    telegram_id: str | None = Field(None, max_length=100)
    discord_id: str | None = Field(None, max_length=100)
    home_address: str | None = Field(None, max_length=500)
    field_of_study: str | None = Field(None, min_length=2, max_length=100)
    department: Department | None = None

    def to_record(self) -> dict:
        """Only fields the caller sent; "" clears the nullable contact fields."""
        record = {}
        for name in ("first_name", "last_name", "phone", "field_of_study", "department"):
            value = getattr(self, name)
            if value:
                record[name] = value
        for name in ("telegram_id", "discord_id", "home_address"):
            if name in self.model_fields_set:
                record[name] = getattr(self, name) or None
        return record


class UserProvision(RequestSchema):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)
    first_name: str | None = Field(None, min_length=2, max_length=100)
    last_name: str | None = Field(None, min_length=2, max_length=100)
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    telegram_id: str | None = Field(None, max_length=100)
    discord_id: str | None = Field(None, max_length=100)
    home_address: str | None = Field(None, max_length=500)
    student_id: str | None = Field(None, max_length=50)
    academic_year: AcademicYear | None = None
    field_of_study: str | None = Field(None, min_length=2, max_length=100)
    role: UserRole | None = None
    department: Department | None = None
    is_active: bool | None = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()

    def overrides(self) -> dict:
        """Profile fields the caller explicitly supplied."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name not in ("email", "password") and getattr(self, name) is not None
        }
