"""FastAPI application factory and the module-level ``app`` served by uvicorn."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from finance_tracker import __version__
from finance_tracker.api.middleware.error_handler import (
    handle_finance_tracker_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from finance_tracker.api.middleware.logging import RequestLoggingMiddleware
from finance_tracker.api.v1 import router as v1_router
from finance_tracker.api.v1.health import router as health_router
from finance_tracker.config import Settings, settings as default_settings
from finance_tracker.core.exceptions import FinanceTrackerError
from finance_tracker.core.logging import setup_logging
from finance_tracker.db.session import Database


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.database.dispose()


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level, json_logs=settings.log_json)

    app = FastAPI(
        title="Finance Tracker API",
        description="Personal income and expense tracking",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.database = database or Database.from_settings(settings)

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(FinanceTrackerError, handle_finance_tracker_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    # Register routers
    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
