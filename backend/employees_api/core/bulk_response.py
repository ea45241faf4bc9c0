"""Bulk Response Shaping: maps a (succeeded, failed) pair to an HTTP response.

Invariants:
    - PURE: no IO, no logging; the caller sends and logs the result
    - Four shapes only: success, partial success, client error, server error
    - Success and partial bodies are {"data", "failed"}; the client error
      body is {"error", "failed"}; the server error body is {"error"}

Design Decisions:
    - Empty/empty maps to 500: the engine yields one outcome per item and the
      batch is validated non-empty, so reaching it means a broken invariant
    - Failed items without an id (bulk create) are labelled by name
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from employees_api.core import messages


class BulkStatus(str, Enum):
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class ShapedResponse:
    status: BulkStatus
    status_code: int
    message: str
    body: dict[str, Any]


def failed_label(item: dict[str, Any]) -> str:
    """Identify a failed item for log and error messages."""
    for key in ("id", "name"):
        if item.get(key) is not None:
            return str(item[key])
    return "?"


def join_labels(values: Sequence[object]) -> str:
    return ", ".join(str(v) for v in values)


def shape_bulk_response(
    succeeded: Sequence[Any],
    failed: Sequence[dict[str, Any]],
    success_message: str,
    failure_message: str,
) -> ShapedResponse:
    """Pick the response shape for a finished batch."""
    failed_ids = join_labels([failed_label(item) for item in failed])
    if succeeded and failed:
        return ShapedResponse(
            BulkStatus.PARTIAL_SUCCESS, 200,
            f"{success_message} - Failed IDs: {failed_ids}",
            {"data": list(succeeded), "failed": list(failed)},
        )
    if succeeded:
        return ShapedResponse(
            BulkStatus.SUCCESS, 200, success_message,
            {"data": list(succeeded), "failed": []},
        )
    if failed:
        error = f"{failure_message} - Failed IDs: {failed_ids}"
        return ShapedResponse(
            BulkStatus.CLIENT_ERROR, 400, error,
            {"error": error, "failed": list(failed)},
        )
    return ShapedResponse(
        BulkStatus.SERVER_ERROR, 500, messages.INTERNAL_SERVER_ERROR,
        {"error": messages.INTERNAL_SERVER_ERROR},
    )
