"""Error Hierarchy — typed, categorized exceptions for every Users API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input-stage errors are 400; everything raised by the data-access stage is 500
    - to_response() produces the {"message": ...} envelope sent to clients
    - StoreError carries the driver's message verbatim

Design Decisions:
    - Single hierarchy with PerqaraError base: one global handler catches all
    - NotFoundError keeps http_status=500; the 404 remap is decided by the handler
      from settings, not by the error itself
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    INPUT = "input"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class PerqaraError(Exception):
    """Base exception for all Users API errors."""

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
        """Convert to the {"message": ...} error envelope."""
        return {"message": self.message}


# ─── Input Errors (400-level) ───────────────────────────────────

class InputParseError(PerqaraError):
    """Path parameter or body could not be parsed."""
    def __init__(self, message: str, code: str = "INVALID_INPUT"):
        super().__init__(
            message, code, ErrorCategory.INPUT,
            ErrorSeverity.WARNING, 400,
        )


class InvalidUserIdError(InputParseError):
    """Path id is not a non-negative integer."""
    def __init__(self, raw: str):
        super().__init__("Invalid user ID", "INVALID_USER_ID")
        self.raw = raw


class FieldValidationError(PerqaraError):
    """Body parsed but one or more fields break the validation rules."""
    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.fields = fields or []


# ─── Data-Access Errors (500-level) ─────────────────────────────

class NotFoundError(PerqaraError):
    """Store returned no row for the requested id."""
    def __init__(self, resource_type: str, resource_id: int):
        super().__init__(
            "record not found", "RECORD_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, 500,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class StoreError(PerqaraError):
    """Query or statement failed (connectivity, constraint, anything else)."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
