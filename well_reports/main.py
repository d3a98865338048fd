"""
FastAPI application entry point for the well reports service.

The app is built by `create_app`, so each instance (and each test) can run
against its own settings and DuckDB file.
"""

import asyncio
import logging
import sys
import uuid
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from well_reports.interfaces.api import auth_routes, report_routes, well_routes
from well_reports.shared.config.settings import Settings, get_settings
from well_reports.shared.dependencies import DependencyContainer
from well_reports.shared.exceptions import (
    ApplicationException,
    ErrorCode,
    ValidationException,
)
from well_reports.shared.responses import ResponseBuilder

logger = logging.getLogger(__name__)

SERVICE_NAME = "well-reports-api"


def configure_logging(settings: Settings) -> None:
    """Console and file logging, configured once per process."""
    logs_dir = Path(settings.LOGS_DIR_NAME)
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(logs_dir / settings.LOG_FILENAME, mode="a")
        ]
    )


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ApplicationException)
    async def application_exception_handler(request: Request, exc: ApplicationException):
        if exc.http_status_code >= 500:
            logger.error(
                f"{request.method} {request.url.path} failed: {exc.message}",
                exc_info=exc.cause
            )
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.http_status_code} {exc.error_code.value}")
        return ResponseBuilder.error(exc, request_id=_request_id(request))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = [str(part) for part in first.get("loc", ()) if part != "body"]
        error = ValidationException(
            message=first.get("msg", "Invalid request body"),
            field=".".join(location) or None
        )
        return ResponseBuilder.error(error, request_id=_request_id(request))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        error = ApplicationException(message="Internal server error", error_code=ErrorCode.INTERNAL_ERROR)
        request_id = _request_id(request)
        response = ResponseBuilder.error(error, request_id=request_id)
        response.headers["X-Request-ID"] = request_id
        return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Defaults to the cached process settings."""
    settings = settings or get_settings()
    settings.setup_directories()
    configure_logging(settings)

    container = DependencyContainer(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {SERVICE_NAME} ({settings.ENV})...")
        container.startup()
        yield
        logger.info(f"Shutting down {SERVICE_NAME}...")

    app = FastAPI(
        title="Well Reports API",
        description="""
        Oil-well operational reporting service.

        - Admins register wells and remove wells or reports.
        - Operators file reports (pressure, temperature, status) against wells.
        - Any authenticated user can list wells and page through reports.

        Authenticate with `POST /login` and send the token as `Authorization: Bearer <token>`.
        """,
        version=settings.VERSION,
        lifespan=lifespan
    )
    app.state.container = container
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    _register_exception_handlers(app)

    app.include_router(auth_routes.router)
    app.include_router(well_routes.router)
    app.include_router(report_routes.router)

    @app.get("/")
    async def root():
        """Service name, version and the endpoint map."""
        return {
            "message": "Well Reports API",
            "version": settings.VERSION,
            "endpoints": {
                "register": "POST /register",
                "login": "POST /login",
                "wells": {
                    "create": "POST /wells",
                    "list": "GET /wells",
                    "delete": "DELETE /wells/{id}"
                },
                "reports": {
                    "create": "POST /reports",
                    "list": "GET /reports?page=&limit=",
                    "delete": "DELETE /reports/{id}"
                },
                "health": "GET /health",
                "docs": "/docs"
            }
        }

    @app.get("/health")
    async def health_check():
        """Service and database health."""
        dependencies = await asyncio.to_thread(container.check_health)
        overall_status = "healthy" if all(v == "healthy" for v in dependencies.values()) else "unhealthy"
        return JSONResponse(
            status_code=200 if overall_status == "healthy" else 503,
            content={
                "status": overall_status,
                "service": SERVICE_NAME,
                "version": settings.VERSION,
                "timestamp": datetime.now().isoformat(),
                "database": "DuckDB",
                "dependencies": dependencies
            }
        )

    return app
