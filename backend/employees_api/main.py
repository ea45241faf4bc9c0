"""Employees API: FastAPI application entry point and composition root.

Invariants:
    - create_app owns the EmployeeStore; handlers get it through get_store
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeServiceError → {"error": message}
    - Every request is logged on arrival

Design Decisions:
    - Lifespan over @app.on_event: logging configured once per process start
    - /api/v1 and /api/v2 share one router factory (see api.routes.employees)
    - Module-level app for `uvicorn employees_api.main:app`; tests call
      create_app() with their own store
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from employees_api.api.error_handlers import register_error_handlers
from employees_api.api.routes import health
from employees_api.api.routes.employees import create_employee_router
from employees_api.config import Settings, get_settings
from employees_api.infrastructure.memory_store import EmployeeStore
from employees_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format, settings.log_file)
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    settings: Settings | None = None, store: EmployeeStore | None = None,
) -> FastAPI:
    """Build the application around one store instance."""
    if settings is None:
        settings = get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else EmployeeStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(
            f"Incoming request: {request.method} {request.url.path}",
            extra={"method": request.method, "path": request.url.path},
        )
        return await call_next(request)

    app.include_router(health.router)
    app.include_router(create_employee_router("/api/v1"))
    app.include_router(
        create_employee_router("/api/v2", distinct_duplicate_errors=False),
    )

    register_error_handlers(app)
    return app


app = create_app()
