"""Error Hierarchy: typed, categorized exceptions for every deliberate failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found errors are 404; infrastructure errors are 5xx
    - to_response() always carries a top-level "message" key

Design Decisions:
    - Single hierarchy under FavoritesError so one global handler covers all of it
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    list_id: int | None = None
    film_id: int | None = None
    debug_info: dict[str, Any] | None = None


class FavoritesError(Exception):
    """Base exception for all favorites API errors."""

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
        """Convert to the REST error envelope."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "list_id": self.context.list_id,
                    "film_id": self.context.film_id,
                },
            },
        }


# ─── Domain Errors (404) ────────────────────────────────────────

class ResourceNotFoundError(FavoritesError):
    """Requested resource does not exist."""
    def __init__(
        self,
        message: str,
        code: str = "RESOURCE_NOT_FOUND",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class FilmNotFoundError(ResourceNotFoundError):
    """Film id could not be resolved against the external catalog."""
    def __init__(self, film_id: int | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.film_id = film_id
        super().__init__("film not found", "FILM_NOT_FOUND", ctx)
        self.film_id = film_id


class ListNotFoundError(ResourceNotFoundError):
    """No favorite list with the requested id."""
    def __init__(self, list_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.list_id = list_id
        super().__init__("list with selected id not found", "LIST_NOT_FOUND", ctx)
        self.list_id = list_id


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(FavoritesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
