"""Record Validation: pure shape checks run before any store mutation.

Invariants:
    - All functions are PURE: no IO, no store access, no side effects
    - Raise ValidationError on the first violation, return None on success
    - Field order is fixed (name, position, id) so the first error is stable
    - bool is never accepted as an integer id; integral floats (1.0) are

Design Decisions:
    - Messages follow the wording clients of the original service already
      match on ('"name" is not allowed to be empty', ...)
    - Hand-written checks over a pydantic model: bulk items must fail one by
      one with a single message, not abort the request with an error list
"""

from collections.abc import Sequence

from employees_api.core.errors import ValidationError
from employees_api.core.models import Employee

MIN_FIELD_LENGTH = 3


def _check_text(label: str, value: object) -> None:
    if value is None:
        raise ValidationError(f'"{label}" is required', field=label)
    if not isinstance(value, str):
        raise ValidationError(f'"{label}" must be a string', field=label)
    if value == "":
        raise ValidationError(f'"{label}" is not allowed to be empty', field=label)
    if len(value) < MIN_FIELD_LENGTH:
        raise ValidationError(
            f'"{label}" length must be at least {MIN_FIELD_LENGTH} characters long',
            field=label,
        )


def as_positive_int(value: object) -> int | None:
    """Return value as an int if it is a positive integer (1.0 counts), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return None


def is_positive_int(value: object) -> bool:
    return as_positive_int(value) is not None


def _is_array(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def validate_new(name: object, position: object) -> None:
    """Rule: name and position are strings of at least MIN_FIELD_LENGTH chars."""
    _check_text("name", name)
    _check_text("position", position)


def validate_update(candidate: Employee) -> None:
    """Rule: the merged record passes validate_new and keeps a positive id."""
    validate_new(candidate.name, candidate.position)
    if not is_positive_int(candidate.id):
        raise ValidationError('"id" must be a positive integer', field="id")


def validate_id_list(ids: object, label: str = "ids") -> None:
    """Rule: a non-empty array whose every element is a positive integer."""
    validate_non_empty_batch(ids, label)
    for i, value in enumerate(ids):
        if not is_positive_int(value):
            raise ValidationError(
                f'"{label}[{i}]" must be a positive integer', field=label,
            )


def validate_non_empty_batch(items: object, label: str = "value") -> None:
    """Rule: bulk input is an array with at least one item."""
    if not _is_array(items) or len(items) == 0:
        raise ValidationError(f'"{label}" must be a non-empty array', field=label)
