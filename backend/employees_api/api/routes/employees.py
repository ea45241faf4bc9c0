"""Employee Routes: single and bulk CRUD over the app-owned EmployeeStore.

Invariants:
    - Literal segments (/bulk, /ids) are registered before /{employee_id}
    - Single-item errors propagate to the global handlers (400/404/500)
    - Bulk routes never raise for an item; the response shape comes from
      core.bulk_response.shape_bulk_response
    - Every bulk response is logged: INFO on 2xx, WARNING on 4xx, ERROR on 5xx

Design Decisions:
    - Router factory over two copied modules: v1 and v2 differ only in how a
      duplicate name is reported on single-item routes
      (v1: "Duplicate name", v2: generic validation error)
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from employees_api.api.dependencies import get_app_settings, get_store
from employees_api.config import Settings
from employees_api.core import messages
from employees_api.core.bulk_response import (
    ShapedResponse, join_labels, shape_bulk_response,
)
from employees_api.core.errors import DuplicateNameError, ValidationError
from employees_api.core.repository_protocols import EmployeeRepository
from employees_api.schemas.employee import (
    EmployeeCreate, EmployeeResponse, EmployeeUpdateRequest,
    IdLookupResponse, IdsRequest,
)
from employees_api.services.employee_bulk import (
    bulk_create, bulk_delete, bulk_update,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def send_shaped(shaped: ShapedResponse) -> JSONResponse:
    """Log the shaped message at a level matching its status, then send it."""
    extra = {"status_code": shaped.status_code}
    if shaped.status_code >= 500:
        logger.error(shaped.message, extra=extra)
    elif shaped.status_code >= 400:
        logger.warning(shaped.message, extra=extra)
    else:
        logger.info(shaped.message, extra=extra)
    return JSONResponse(status_code=shaped.status_code, content=shaped.body)


def create_employee_router(
    prefix: str, distinct_duplicate_errors: bool = True,
) -> APIRouter:
    """Build the /employees router mounted under prefix."""
    router = APIRouter(prefix=f"{prefix}/employees", tags=["employees"])

    def run_single(operation: Callable[..., T], *args: Any) -> T:
        try:
            return operation(*args)
        except DuplicateNameError as e:
            if distinct_duplicate_errors:
                raise
            raise ValidationError(messages.VALIDATION_ERROR, field="name") from e

    # ─── Create ──────────────────────────────────────────────────

    @router.post(
        "", response_model=EmployeeResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_employee(
        body: EmployeeCreate, store: EmployeeRepository = Depends(get_store),
    ):
        employee = run_single(store.create, body.name, body.position)
        logger.info(
            f"{messages.EMPLOYEE_CREATED} - ID: {employee.id}",
            extra={"employee_id": employee.id},
        )
        return employee.to_dict()

    @router.post("/bulk")
    async def create_employees(
        items: Any = Body(None), store: EmployeeRepository = Depends(get_store),
    ):
        outcome = bulk_create(store, items)
        ids = join_labels([e.id for e in outcome.succeeded])
        return send_shaped(shape_bulk_response(
            [e.to_dict() for e in outcome.succeeded], outcome.failed,
            f"{messages.EMPLOYEES_CREATED} - IDs: {ids}",
            messages.FAILED_CREATE_EMPLOYEES,
        ))

    # ─── Read ────────────────────────────────────────────────────

    @router.get("", response_model=list[EmployeeResponse])
    async def list_employees(
        page: int = Query(1),
        limit: int | None = Query(None),
        store: EmployeeRepository = Depends(get_store),
        settings: Settings = Depends(get_app_settings),
    ):
        """List employees in insertion order; pages past the end are empty."""
        if limit is None:
            limit = settings.default_page_limit
        return [e.to_dict() for e in store.list(page, limit)]

    @router.post("/ids", response_model=IdLookupResponse)
    async def get_employees_by_ids(
        body: IdsRequest, store: EmployeeRepository = Depends(get_store),
    ):
        lookup = store.find_by_ids(body.ids)
        return IdLookupResponse(
            found_employees=[e.to_dict() for e in lookup.found],
            not_found_ids=lookup.not_found,
        )

    # ─── Bulk update / delete ────────────────────────────────────

    @router.put("/bulk")
    async def update_employees(
        items: Any = Body(None), store: EmployeeRepository = Depends(get_store),
    ):
        outcome = bulk_update(store, items)
        ids = join_labels([e.id for e in outcome.succeeded])
        return send_shaped(shape_bulk_response(
            [e.to_dict() for e in outcome.succeeded], outcome.failed,
            f"{messages.EMPLOYEES_UPDATED} - IDs: {ids}",
            messages.FAILED_UPDATE_EMPLOYEES,
        ))

    @router.delete("/bulk")
    async def delete_employees(
        body: IdsRequest, store: EmployeeRepository = Depends(get_store),
    ):
        outcome = bulk_delete(store, body.ids)
        return send_shaped(shape_bulk_response(
            outcome.succeeded, outcome.failed,
            f"{messages.EMPLOYEES_DELETED} - IDs: {join_labels(outcome.succeeded)}",
            messages.FAILED_DELETE_EMPLOYEES,
        ))

    # ─── Single by id ────────────────────────────────────────────

    @router.get("/{employee_id}", response_model=EmployeeResponse)
    async def get_employee(
        employee_id: int, store: EmployeeRepository = Depends(get_store),
    ):
        employee = store.get(employee_id)
        logger.info(
            f"{messages.EMPLOYEE_RETRIEVED} - ID: {employee.id}",
            extra={"employee_id": employee.id},
        )
        return employee.to_dict()

    @router.put("/{employee_id}", response_model=EmployeeResponse)
    async def update_employee(
        employee_id: int,
        body: EmployeeUpdateRequest,
        store: EmployeeRepository = Depends(get_store),
    ):
        employee = run_single(store.update, employee_id, body.to_update())
        logger.info(
            f"{messages.EMPLOYEE_UPDATED} - ID: {employee.id}",
            extra={"employee_id": employee.id},
        )
        return employee.to_dict()

    @router.delete(
        "/{employee_id}", status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
    )
    async def delete_employee(
        employee_id: int, store: EmployeeRepository = Depends(get_store),
    ):
        store.delete(employee_id)
        logger.info(
            f"{messages.EMPLOYEE_DELETED} - ID: {employee_id}",
            extra={"employee_id": employee_id},
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
