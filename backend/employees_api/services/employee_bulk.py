"""Employee Bulk Services: batch create/update/delete over an EmployeeRepository.

Invariants:
    - Batch shape is validated before any item is processed (raises ValidationError)
    - After that, nothing raises for an individual item: failures land in
      BatchOutcome.failed with the item payload and an "error" message
    - Update items carry their target id; a missing id fails as not found
    - Delete failures are reported as {"id": <id>, "error": <message>}

Design Decisions:
    - Thin adapters around core.bulk_engine.run_batch: the per-item operation
      is a closure over the repository, so the engine stays store-agnostic
"""

import logging
from collections.abc import Mapping
from typing import Any

from employees_api.core.bulk_engine import BatchOutcome, run_batch
from employees_api.core.errors import ValidationError
from employees_api.core.models import Employee, EmployeeUpdate
from employees_api.core.repository_protocols import EmployeeRepository
from employees_api.core.validation import (
    as_positive_int, validate_id_list, validate_non_empty_batch,
)

logger = logging.getLogger(__name__)


def _require_object(item: object) -> Mapping[str, Any]:
    if not isinstance(item, Mapping):
        raise ValidationError('"value" must be of type object', field="value")
    return item


def _log_summary(operation: str, outcome: BatchOutcome) -> None:
    logger.info(
        f"Bulk {operation} processed",
        extra={"succeeded": len(outcome.succeeded), "failed": len(outcome.failed)},
    )


def bulk_create(repo: EmployeeRepository, items: object) -> BatchOutcome[Employee]:
    """Create every valid, uniquely named item; collect the rest as failures."""
    validate_non_empty_batch(items)

    def create_one(item: object) -> Employee:
        payload = _require_object(item)
        return repo.create(payload.get("name"), payload.get("position"))

    outcome = run_batch(items, create_one)
    _log_summary("create", outcome)
    return outcome


def bulk_update(repo: EmployeeRepository, items: object) -> BatchOutcome[Employee]:
    """Apply {id, ...fields} items independently."""
    validate_non_empty_batch(items)

    def update_one(item: object) -> Employee:
        payload = _require_object(item)
        return repo.update(payload.get("id"), EmployeeUpdate.from_payload(payload))

    outcome = run_batch(items, update_one)
    _log_summary("update", outcome)
    return outcome


def bulk_delete(repo: EmployeeRepository, ids: object) -> BatchOutcome[int]:
    """Delete each id independently; returns the deleted ids as succeeded."""
    validate_id_list(ids)

    def delete_one(employee_id: object) -> int:
        repo.delete(employee_id)
        return as_positive_int(employee_id)

    outcome = run_batch(ids, delete_one, to_payload=lambda i: {"id": i})
    _log_summary("delete", outcome)
    return outcome
