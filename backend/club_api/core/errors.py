"""Error Hierarchy - typed, categorized exceptions for every club API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level; store failures are 500-level
    - to_response() always produces the {success: false, error, ...} envelope
    - Infrastructure messages are never returned verbatim in production
      (see api/error_handlers.py)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context attached to log records, never to responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    table: str | None = None
    debug_info: dict[str, Any] | None = None


@dataclass(frozen=True)
class FieldError:
    """One field-level validation failure."""
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ClubError(Exception):
    """Base exception for all club API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {"success": False, "error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(ClubError):
    """Request body failed schema validation. Carries every failing field."""
    def __init__(
        self,
        details: list[FieldError],
        message: str = "Validation error",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.details = details

    @property
    def fields(self) -> list[str]:
        return [d.field for d in self.details]

    def to_response(self) -> dict:
        return {
            "success": False,
            "error": self.message,
            "details": [d.to_dict() for d in self.details],
        }


class BusinessRuleError(ClubError):
    """Well-formed request rejected by a domain rule (event full, not active)."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class NotFoundError(ClubError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(ClubError):
    """Uniqueness violation: duplicate email, registration or user."""
    def __init__(
        self,
        message: str,
        data: dict[str, Any] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.data = data

    def to_response(self) -> dict:
        body = super().to_response()
        if self.data is not None:
            body["data"] = self.data
        return body


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DataAccessError(ClubError):
    """Store-level failure wrapping the underlying driver/ORM error."""
    def __init__(
        self,
        message: str,
        operation: str,
        table: str | None = None,
        constraint_violation: bool = False,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.table = table
        super().__init__(
            f"Database {operation} failed on {table or 'unknown table'}: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.table = table
        self.constraint_violation = constraint_violation
