"""Bulk Operation Engine: best-effort, continue-on-error batch application.

Invariants:
    - Every item is attempted; a failure on item i never skips items i+1..n
    - No rollback: items applied before a later failure stay applied
    - Only EmployeeServiceError is collected per item; anything else propagates
    - len(succeeded) + len(failed) == len(items)
    - A failed entry is the item's payload plus an "error" message

Design Decisions:
    - Fold over the input: apply_item() handles exactly one item and is testable
      without the loop; record_outcome() is the accumulator step
    - Processing is sequential, so within one batch the first item to claim a
      name wins and later duplicates fail against the committed record
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Generic, TypeVar

from employees_api.core.errors import EmployeeServiceError

ItemT = TypeVar("ItemT")
ResultT = TypeVar("ResultT")


@dataclass
class BatchOutcome(Generic[ResultT]):
    """Two parallel results of one batch."""
    succeeded: list[ResultT] = field(default_factory=list)
    failed: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class ItemOutcome(Generic[ResultT]):
    """Result of a single item: either result or failure is set."""
    result: ResultT | None = None
    failure: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def default_payload(item: object) -> dict[str, Any]:
    """Echo a mapping item as-is; wrap anything else under "value"."""
    if isinstance(item, Mapping):
        return dict(item)
    return {"value": item}


def apply_item(
    item: ItemT,
    operation: Callable[[ItemT], ResultT],
    to_payload: Callable[[ItemT], dict[str, Any]] = default_payload,
) -> ItemOutcome[ResultT]:
    """Run operation on one item, converting a domain error into a failure entry."""
    try:
        return ItemOutcome(result=operation(item))
    except EmployeeServiceError as e:
        return ItemOutcome(failure={**to_payload(item), "error": e.message})


def record_outcome(
    acc: BatchOutcome[ResultT], outcome: ItemOutcome[ResultT],
) -> BatchOutcome[ResultT]:
    if outcome.ok:
        acc.succeeded.append(outcome.result)
    else:
        acc.failed.append(outcome.failure)
    return acc


def run_batch(
    items: Iterable[ItemT],
    operation: Callable[[ItemT], ResultT],
    to_payload: Callable[[ItemT], dict[str, Any]] = default_payload,
) -> BatchOutcome[ResultT]:
    """Apply operation to every item in order, collecting successes and failures."""
    return reduce(
        record_outcome,
        (apply_item(item, operation, to_payload) for item in items),
        BatchOutcome(),
    )
