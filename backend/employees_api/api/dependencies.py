"""Request Dependencies: hand the app-owned store and settings to route handlers.

Invariants:
    - Handlers never reach a module-level store; create_app owns the instance
"""

from fastapi import Request

from employees_api.config import Settings
from employees_api.core.repository_protocols import EmployeeRepository


def get_store(request: Request) -> EmployeeRepository:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
