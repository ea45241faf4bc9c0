"""User-facing message strings shared by routes, services and errors.

Invariants:
    - One constant per message; callers never inline these literals
"""

# ─── Errors ──────────────────────────────────────────────────────

EMPLOYEE_NOT_FOUND = "Employee not found"
DUPLICATE_NAME = "Duplicate name"
VALIDATION_ERROR = "Validation error occurred"
INTERNAL_SERVER_ERROR = "Internal server error"
FAILED_CREATE_EMPLOYEES = "Failed to create employees"
FAILED_UPDATE_EMPLOYEES = "Failed to update employees"
FAILED_DELETE_EMPLOYEES = "Failed to delete employees"

# ─── Success ─────────────────────────────────────────────────────

EMPLOYEE_CREATED = "Employee created successfully"
EMPLOYEE_RETRIEVED = "Employee retrieved successfully"
EMPLOYEE_UPDATED = "Employee updated successfully"
EMPLOYEE_DELETED = "Employee deleted successfully"
EMPLOYEES_CREATED = "Employees created successfully"
EMPLOYEES_UPDATED = "Employees updated successfully"
EMPLOYEES_DELETED = "Employees deleted successfully"
