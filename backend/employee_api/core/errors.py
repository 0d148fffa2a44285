"""Error Hierarchy — typed, categorized exceptions for all Employee API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EmployeeApiError base: FastAPI global handler catches all
    - ResourceNotFoundError is also usable as a plain value: lookups return it
      instead of raising, and the router maps it to a response
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
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class EmployeeApiError(Exception):
    """Base exception for all Employee API errors."""

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
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequestDataError(EmployeeApiError):
    """Request body, path or query failed validation."""
    def __init__(
        self, details: list[dict[str, str]], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["details"] = self.details
        return body


class ResourceNotFoundError(EmployeeApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} not exist with id :{resource_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EmployeeApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class InternalError(EmployeeApiError):
    """Unexpected failure; the message never carries internal details."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
