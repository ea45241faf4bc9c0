"""Employee Schemas: request bodies and responses for the employee routes.

Invariants:
    - Single-item bodies only type-check fields; length rules are enforced by
      the store so single and bulk paths report identical messages
    - Bulk bodies are untyped (Any): a malformed item must fail alone, not
      reject the whole request at parse time
    - Unknown fields are ignored (an "id" in an update body cannot re-key a record)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from employees_api.core.models import EmployeeUpdate


class EmployeeCreate(BaseModel):
    """Single employee creation."""
    name: str | None = None
    position: str | None = None


class EmployeeUpdateRequest(BaseModel):
    """Partial update of one employee: omitted fields keep their value."""
    name: str | None = None
    position: str | None = None

    def to_update(self) -> EmployeeUpdate:
        return EmployeeUpdate(name=self.name, position=self.position)


class EmployeeResponse(BaseModel):
    id: int
    name: str
    position: str


class IdsRequest(BaseModel):
    """Body for id-list endpoints; element rules checked by core.validation."""
    ids: Any = None


class IdLookupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    found_employees: list[EmployeeResponse] = Field(
        default_factory=list, alias="foundEmployees",
    )
    not_found_ids: list[int] = Field(
        default_factory=list, alias="notFoundIds",
    )
