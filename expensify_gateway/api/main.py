"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from expensify_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from expensify_gateway.api.v1 import budget, calendar, finances, habits, insights
from expensify_gateway.domain.exceptions import (
    DomainException,
    DuplicateHabitError,
    HabitNotFoundError,
    InvalidHabitError,
    TransactionNotFoundError,
)
from expensify_gateway.infrastructure.database.session import init_db
from expensify_gateway.infrastructure.observability.logging import setup_logging
from expensify_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)

_STATUS_BY_ERROR = {
    TransactionNotFoundError: 404,
    HabitNotFoundError: 404,
    DuplicateHabitError: 409,
    InvalidHabitError: 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Map domain errors to HTTP status codes"""
    status_code = _STATUS_BY_ERROR.get(type(exc), 400)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Expensify Gateway",
        description="Habit tracking, budgeting and financial risk insights",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(DomainException, domain_exception_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(finances.router, prefix="/v1", tags=["finances"])
    app.include_router(budget.router, prefix="/v1", tags=["budget"])
    app.include_router(insights.router, prefix="/v1", tags=["insights"])
    app.include_router(habits.router, prefix="/v1", tags=["habits"])
    app.include_router(calendar.router, prefix="/v1", tags=["calendar"])

    return app


app = create_app()
