"""Employee Domain Types: records, typed partial updates and lookup results.

Invariants:
    - Employee is immutable; an update produces a new Employee with the same id
    - EmployeeUpdate never carries an id: apply_to() cannot re-key a record
    - None in EmployeeUpdate means "field not provided"

Design Decisions:
    - Explicit partial-update type over dict spreading: the set of mutable
      fields is closed (name, position) and visible to the type checker
    - frozen dataclasses: stored records can be handed to callers without copies
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

UPDATABLE_FIELDS = ("name", "position")


@dataclass(frozen=True)
class Employee:
    """A live employee record. id is assigned by the store."""
    id: int
    name: str
    position: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "position": self.position}


@dataclass(frozen=True)
class EmployeeUpdate:
    """Partial update: only provided fields overwrite the existing record."""
    name: str | None = None
    position: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EmployeeUpdate":
        """Read the updatable fields from a raw request item; other keys are ignored."""
        return cls(**{k: payload.get(k) for k in UPDATABLE_FIELDS})

    @property
    def changes(self) -> dict[str, Any]:
        return {
            k: getattr(self, k) for k in UPDATABLE_FIELDS
            if getattr(self, k) is not None
        }

    def apply_to(self, employee: Employee) -> Employee:
        """Field-by-field override of employee; id is preserved."""
        return replace(employee, **self.changes)


@dataclass
class IdLookup:
    """Partition of an id list into found records and unknown ids (input order kept)."""
    found: list[Employee] = field(default_factory=list)
    not_found: list[int] = field(default_factory=list)
