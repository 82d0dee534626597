"""Error Hierarchy — typed, categorized exceptions for every Task API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the failure envelope {"message": "failure", "payload": {...}}
    - Duplicate usernames stay 500-class; an unreachable store is a distinct 503

Design Decisions:
    - Single hierarchy with TaskApiError base: one global handler catches all (uniform error shape)
    - Classification happens once, in infrastructure/database.py — controllers and routes
      never inspect driver exceptions
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    DATABASE = "database"
    INTERNAL = "internal"


class TaskApiError(Exception):
    """Base exception for all Task API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        return {
            "message": "failure",
            "payload": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            },
        }


class InvalidIdentifierError(TaskApiError):
    """A value handed to the persistence layer is not a structurally valid identifier."""
    def __init__(self, value: object, field: str = "id"):
        super().__init__(
            f"'{value}' is not a valid identifier for {field}",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 500,
        )
        self.field = field


class ConflictError(TaskApiError):
    """A uniqueness or integrity constraint rejected the write."""
    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, 500,
        )


class UniqueViolationError(ConflictError):
    """A unique index rejected the write."""
    def __init__(self, message: str, code: str = "UNIQUE_VIOLATION"):
        super().__init__(message, code)


class DuplicateUsernameError(UniqueViolationError):
    """Unique index on users.username rejected the write."""
    def __init__(self, username: str | None = None):
        super().__init__(
            f"Username '{username}' already exists"
            if username else "Username already exists",
            "DUPLICATE_USERNAME",
        )
        self.username = username


class StoreUnavailableError(TaskApiError):
    """Store unreachable, or the startup connection never succeeded."""
    def __init__(self, message: str = "Database is unavailable"):
        super().__init__(
            message, "STORE_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, 503,
        )


class DatabaseError(TaskApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
