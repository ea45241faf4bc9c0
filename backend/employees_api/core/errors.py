"""Error Hierarchy: typed, categorized exceptions for every employee failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400/404; anything outside the hierarchy becomes a 500
    - to_response() produces the REST envelope {"error": <message>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EmployeeServiceError base: one global handler maps
      all of them, and the bulk engine catches exactly this base per item
    - ValidationError shares its name with pydantic's; modules that need
      both import pydantic's as PydanticValidationError
"""

from enum import Enum

from employees_api.core import messages


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
    CONFLICT = "conflict"
    INTERNAL = "internal"


class EmployeeServiceError(Exception):
    """Base exception for all employee service errors."""

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
        """Convert to standardized REST error response."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(EmployeeServiceError):
    """Malformed or missing fields, empty batch, bad id list."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self.field = field


class NotFoundError(EmployeeServiceError):
    """Requested employee id refers to no live record."""
    def __init__(self, employee_id: object = None):
        super().__init__(
            messages.EMPLOYEE_NOT_FOUND, "EMPLOYEE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, 404,
        )
        self.employee_id = employee_id


class DuplicateNameError(EmployeeServiceError):
    """Another live employee already holds this name."""
    def __init__(self, name: str):
        super().__init__(
            messages.DUPLICATE_NAME, "DUPLICATE_NAME",
            ErrorCategory.CONFLICT, ErrorSeverity.ERROR, 400,
        )
        self.name = name
