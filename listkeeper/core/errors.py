"""Error Hierarchy: typed, categorized exceptions for every listkeeper failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors are 400-level; store errors are 500-level
    - to_response() always produces {"error": <message>}

Design Decisions:
    - Single hierarchy with ListKeeperError base: one FastAPI handler catches all
    - code/category/severity feed the logs, not the response body
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity; picks the log level in the API error handler."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"


class ListKeeperError(Exception):
    """Base exception for all listkeeper errors."""

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

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ItemValidationError(ListKeeperError):
    """Item input failed validation."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreUnavailableError(ListKeeperError):
    """The store handle was never opened or has been closed."""
    def __init__(self):
        super().__init__(
            "Database not available", "STORE_UNAVAILABLE",
            ErrorCategory.DATABASE, ErrorSeverity.CRITICAL, 500,
        )


class DatabaseError(ListKeeperError):
    """A store call failed. The message is the driver's own."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
