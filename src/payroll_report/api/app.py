"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from payroll_report.api.routes import health_router, report_router
from payroll_report.api.schemas import StatusResponse
from payroll_report.calculators import seed_pay_groups
from payroll_report.database import create_schema, dispose_db, init_db
from payroll_report.ingestion import IngestionError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup: the service must not run against a store it cannot prepare
    engine, session_factory = init_db()
    try:
        await create_schema(engine)
        async with session_factory() as session:
            await seed_pay_groups(session)
    except Exception:
        logger.critical("Could not prepare the database; shutting down", exc_info=True)
        raise
    app.state.ready = True
    yield
    # Shutdown
    app.state.ready = False
    await dispose_db()


def bad_request(message: str) -> JSONResponse:
    """Build the 400 envelope used for every client error."""
    body = StatusResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        status_text="Bad Request",
        error=message,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Payroll Report API",
        description="Time report ingestion and semi-monthly payroll reporting",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.ready = False

    # Exception handlers
    @app.exception_handler(IngestionError)
    async def ingestion_exception_handler(
        request: Request, exc: IngestionError
    ) -> JSONResponse:
        """Reject the upload with the error's message."""
        return bad_request(exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed requests as bad requests."""
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        return bad_request(message)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(report_router)

    return app


# Default app instance for uvicorn
app = create_app()
