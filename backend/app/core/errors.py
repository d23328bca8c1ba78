"""Error Hierarchy — typed, categorized exceptions for every Academia API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - HTTP status is derived from the category through HTTP_STATUS_BY_CATEGORY
    - Client errors (400/404/409) are recoverable; storage errors (500) are critical
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with AcademiaError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Category is the tag: handlers never inspect class names or message text
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories; the category is the tag every handler switches on."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


HTTP_STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.RESOURCE_NOT_FOUND: 404,
    ErrorCategory.CONFLICT: 409,
    ErrorCategory.DATABASE: 500,
    ErrorCategory.INTERNAL: 500,
}


@dataclass(frozen=True)
class FieldViolation:
    """One field-level validation failure (dotted field path + readable message)."""
    field: str
    message: str
    type: str = "value_error"

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


@dataclass
class ErrorContext:
    """Context attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class AcademiaError(Exception):
    """Base exception for all Academia API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_CATEGORY[self.category]

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(AcademiaError):
    """Request payload failed schema checks. Raised before any storage call."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.violations = violations

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [v.to_dict() for v in self.violations]
        return response


class ResourceNotFoundError(AcademiaError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )


class ReferenceConflictError(AcademiaError):
    """Write rejected by a plan reference (dangling planId or plan still in use)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REFERENCE_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )


# ─── Storage Errors (500-level) ─────────────────────────────────

class DatabaseError(AcademiaError):
    """Database operation failed. Underlying driver message is never exposed."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
