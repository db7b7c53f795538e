"""SQLAlchemy Declarative Base - shared base class and metadata for all tables.

Invariants:
    - All models inherit from Base
    - Base.metadata is the table registry the generic data access layer resolves names against
    - Constraint names follow NAMING_CONVENTION so migrations can reference them
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all club ORM models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
