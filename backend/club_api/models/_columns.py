"""Shared column factories for ids and audit timestamps."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import mapped_column
from sqlalchemy.dialects.postgresql import UUID


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def id_column():
    return mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )


def created_at_column():
    return mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )


def updated_at_column():
    """Refreshed on every UPDATE issued through SQLAlchemy (ORM or Core)."""
    return mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )
