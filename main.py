"""
DailyDiet FastAPI Application
Main entry point: app factory, lifespan, middleware and exception handlers
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import users, meals, health
from domain.models import Database
from app.config import Settings, settings as default_settings
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    app_exception_handler,
    general_exception_handler,
)
from app.exceptions import AppError

_logger = logging.getLogger("dailydiet.main")


def configure_logging(app_settings: Settings) -> None:
    """Apply the configured level and format to the application loggers"""
    level = getattr(logging, app_settings.log_level.upper())
    logging.basicConfig(level=level, format=app_settings.log_format)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("dailydiet").setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Creates the schema (with retries while the database comes up) and
    releases pooled connections on shutdown.
    """
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    _logger.info(f"Starting {app_settings.app_name} in {app_settings.environment.value} mode")

    for attempt in range(1, app_settings.db_init_attempts + 1):
        try:
            # Run blocking init in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(database.init_database)
            _logger.info("Database initialization succeeded")
            break
        except Exception as exc:
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                app_settings.db_init_attempts,
                exc,
            )
            if attempt < app_settings.db_init_attempts:
                await anyio.sleep(app_settings.db_init_delay_sec)
            else:
                _logger.error(
                    "Database initialization failed after %d attempts", attempt
                )
                raise

    try:
        yield
    finally:
        _logger.info(f"Shutting down {app_settings.app_name}")
        database.dispose()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings (defaults to the environment)."""
    app_settings = app_settings or default_settings
    configure_logging(app_settings)

    app = FastAPI(
        title=app_settings.api_title,
        version=app_settings.app_version,
        description=app_settings.api_description,
        lifespan=lifespan,
        debug=app_settings.debug,
        openapi_url=(
            f"{app_settings.api_prefix}/openapi.json"
            if not app_settings.is_production()
            else None
        ),
        docs_url=(
            f"{app_settings.api_prefix}/docs" if not app_settings.is_production() else None
        ),
        redoc_url=(
            f"{app_settings.api_prefix}/redoc" if not app_settings.is_production() else None
        ),
    )
    app.state.settings = app_settings
    app.state.database = Database(app_settings.database_url, echo=app_settings.db_echo)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(AppError, app_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(users.router, prefix=app_settings.api_prefix)
    app.include_router(meals.router, prefix=app_settings.api_prefix)
    app.include_router(health.router, prefix=app_settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
