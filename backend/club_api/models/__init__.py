"""ORM Models - SQLAlchemy declarative models for all club tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata knows every table before any
      DataAccess lookup or migration autogenerate runs
"""

from club_api.models.user import User  # noqa: F401
from club_api.models.join_application import JoinApplication  # noqa: F401
from club_api.models.event import Event  # noqa: F401
from club_api.models.event_registration import EventRegistration  # noqa: F401
from club_api.models.task import Task  # noqa: F401
from club_api.models.announcement import Announcement  # noqa: F401
