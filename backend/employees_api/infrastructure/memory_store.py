"""In-Memory Employee Store: keyed records with a monotonic id allocator.

Invariants:
    - No two live records share a name (case-sensitive exact match)
    - Ids start at 1, grow by one per successful create, are never reused
      (reset() clears records but not the counter)
    - Iteration order is insertion order; update keeps a record's position
    - Every read and every read-check-write sequence runs under one per-store lock
    - Non-integer and boolean ids are treated as unknown; 1.0 is id 1

Design Decisions:
    - dict over an ordered list: O(1) get/delete and insertion-ordered slicing
    - RLock per store, not per record: the uniqueness check spans all records
    - One instance per app, owned by the composition root (main.create_app)
"""

import logging
import threading

from employees_api.core.errors import DuplicateNameError, NotFoundError
from employees_api.core.models import Employee, EmployeeUpdate, IdLookup
from employees_api.core.validation import (
    as_positive_int, validate_id_list, validate_new, validate_update,
)

logger = logging.getLogger(__name__)


class EmployeeStore:
    """Process-lifetime store of employee records."""

    def __init__(self):
        self._employees: dict[int, Employee] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._employees)

    def _lookup(self, employee_id: object) -> Employee:
        key = as_positive_int(employee_id)
        employee = self._employees.get(key) if key is not None else None
        if employee is None:
            raise NotFoundError(employee_id)
        return employee

    def _ensure_unique(self, name: str) -> None:
        if self.has_by_name(name):
            raise DuplicateNameError(name)

    def create(self, name: object, position: object) -> Employee:
        """Validate, check name uniqueness, then allocate the next id."""
        validate_new(name, position)
        with self._lock:
            self._ensure_unique(name)
            employee = Employee(id=self._next_id, name=name, position=position)
            self._next_id += 1
            self._employees[employee.id] = employee
        logger.debug("Employee created", extra={"employee_id": employee.id})
        return employee

    def get(self, employee_id: object) -> Employee:
        with self._lock:
            return self._lookup(employee_id)

    def update(self, employee_id: object, updates: EmployeeUpdate) -> Employee:
        """Merge updates over the existing record and re-validate the result."""
        with self._lock:
            current = self._lookup(employee_id)
            merged = updates.apply_to(current)
            validate_update(merged)
            if merged.name != current.name:
                self._ensure_unique(merged.name)
            self._employees[current.id] = merged
        return merged

    def delete(self, employee_id: object) -> None:
        with self._lock:
            employee = self._lookup(employee_id)
            del self._employees[employee.id]

    def find_by_ids(self, ids: object) -> IdLookup:
        validate_id_list(ids)
        lookup = IdLookup()
        with self._lock:
            for employee_id in map(as_positive_int, ids):
                employee = self._employees.get(employee_id)
                if employee is None:
                    lookup.not_found.append(employee_id)
                else:
                    lookup.found.append(employee)
        return lookup

    def has_by_name(self, name: str) -> bool:
        with self._lock:
            return any(e.name == name for e in self._employees.values())

    def reset(self) -> None:
        with self._lock:
            self._employees.clear()

    def list(self, page: int, limit: int) -> "list[Employee]":
        """Slice of records in insertion order; out-of-range pages are empty."""
        if page < 1 or limit < 1:
            return []
        start = (page - 1) * limit
        with self._lock:
            if start >= len(self._employees):
                return []
            return list(self._employees.values())[start:start + limit]
