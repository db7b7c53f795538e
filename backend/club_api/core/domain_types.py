"""Domain Types - enumerated value sets shared by validation and list filtering.

Invariants:
    - Every enumerated domain is defined exactly once, here
    - Schemas (schemas/) and filter parsing (core/filters.py) both reference these enums
    - str Enums: values are the wire and storage representation
"""

from enum import Enum


# ─── Shared Enums ────────────────────────────────────────────────

class AcademicYear(str, Enum):
    FIRST = "1"
    SECOND = "2"
    THIRD = "3"
    FOURTH = "4"
    FIFTH = "5"
    MASTER = "master"
    PHD = "phd"
    FACULTY = "faculty"


class Department(str, Enum):
    IT = "it"
    EVENTS = "events"
    SOCIAL_MEDIA = "social-media"
    DESIGN = "design"
    EXTERN = "extern"


class UserRole(str, Enum):
    ADMIN = "admin"
    DEPARTMENT_HEAD = "department-head"
    MEMBER = "member"


# ─── Join Applications ───────────────────────────────────────────

class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# ─── Events ──────────────────────────────────────────────────────

class EventStatus(str, Enum):
    """Event lifecycle. Independent of the is_active registration gate."""
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class EventDifficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ALL_LEVELS = "all-levels"


class RegistrationStatus(str, Enum):
    """Only REGISTERED rows count against an event's capacity."""
    REGISTERED = "registered"
    ATTENDED = "attended"
    CANCELLED = "cancelled"


# ─── Tasks ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ─── Announcements ───────────────────────────────────────────────

class TargetAudience(str, Enum):
    ALL = "all"
    DEPARTMENT = "department"
    ADMINS = "admins"
