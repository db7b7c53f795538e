"""JoinApplication ORM - public membership application.

Invariants:
    - email is unique (one application per email)
    - status transitions only through PUT /api/join/{id}/status
    - reviewed_by references users.id; cleared if that user disappears
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from club_api.db.base import Base
from club_api.models._columns import id_column, created_at_column, updated_at_column


class JoinApplication(Base):
    """Application submitted by a prospective member."""
    __tablename__ = "join_applications"

    id: Mapped[uuid.UUID] = id_column()
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    telegram_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    discord_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    home_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    academic_year: Mapped[str] = mapped_column(String(20), nullable=False)
    field_of_study: Mapped[str] = mapped_column(String(100), nullable=False)
    preferred_department: Mapped[str] = mapped_column(String(20), nullable=False)
    secondary_department: Mapped[str | None] = mapped_column(String(20), nullable=True)
    skills: Mapped[str | None] = mapped_column(Text, nullable=True)
    motivation: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    reviewed_by: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True,
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()
