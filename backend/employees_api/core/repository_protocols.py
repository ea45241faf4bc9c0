"""Boundary Protocols: contract between the bulk services and the record store.

Invariants:
    - Services depend on EmployeeRepository, never on a concrete store
    - create/update/delete/get raise the core error types, never return None

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory store needs no base class
    - Synchronous methods: the store is in-memory and never blocks on IO
"""

from typing import Protocol

from employees_api.core.models import Employee, EmployeeUpdate, IdLookup


class EmployeeRepository(Protocol):
    """Contract for employee record persistence: implemented by infrastructure."""
    def create(self, name: object, position: object) -> Employee: ...
    def get(self, employee_id: object) -> Employee: ...
    def update(self, employee_id: object, updates: EmployeeUpdate) -> Employee: ...
    def delete(self, employee_id: object) -> None: ...
    def list(self, page: int, limit: int) -> list[Employee]: ...
    def find_by_ids(self, ids: object) -> IdLookup: ...
    def has_by_name(self, name: str) -> bool: ...
    def reset(self) -> None: ...
    def __len__(self) -> int: ...
