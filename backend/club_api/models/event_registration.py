"""EventRegistration ORM - a user's seat at an event.

Invariants:
    - (event_id, user_id) is unique: one registration per user per event
    - Removed with its event (ON DELETE CASCADE)
"""

import uuid
from datetime import datetime

from sqlalchemy import String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from club_api.db.base import Base
from club_api.models._columns import id_column, created_at_column


class EventRegistration(Base):
    """Link between an event and a registered user."""
    __tablename__ = "event_registrations"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_event_registrations_event_user"),
    )

    id: Mapped[uuid.UUID] = id_column()
    event_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="registered")
    created_at: Mapped[datetime] = created_at_column()
