"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ungdoms.api.v1 import api_router
from ungdoms.api.v1.endpoints import health
from ungdoms.core.config import settings
from ungdoms.core.exceptions import (
    InvalidStatusTransitionError,
    StoreError,
    VersionConflictError,
)
from ungdoms.core.logging import setup_logging
from ungdoms.core.store import JsonStore

# Initialize logging
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan events.

    Handles startup and shutdown tasks:
    - Loading the JSON document store into memory
    - Final flush on shutdown
    """
    logger.info(
        "Starting Ungdoms API",
        extra={
            "env": settings.APP_ENV,
            "debug": settings.APP_DEBUG,
            "store_path": str(settings.STORE_PATH),
        },
    )

    store = JsonStore(settings.STORE_PATH, seed_default_staff=settings.STORE_SEED_DEFAULT_STAFF)
    try:
        await store.load()
    except StoreError as e:
        logger.error(f"Failed to load store: {e}")
        raise
    app.state.store = store

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down Ungdoms API")

    try:
        await store.flush()
        logger.info("Store flushed")
    except StoreError as e:
        logger.error(f"Error flushing store on shutdown: {e}")

    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Care administration for youth outpatient care: clients, care plans, GFP and documentation",
    docs_url="/api/docs" if settings.APP_DEBUG else None,
    redoc_url="/api/redoc" if settings.APP_DEBUG else None,
    openapi_url="/api/openapi.json" if settings.APP_DEBUG else None,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Storage failures: the change was not persisted and was rolled back."""
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage is unavailable; the change was not saved"},
    )


@app.exception_handler(VersionConflictError)
async def version_conflict_handler(request: Request, exc: VersionConflictError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": str(exc),
            "expectedVersion": exc.expected,
            "currentVersion": exc.actual,
        },
    )


@app.exception_handler(InvalidStatusTransitionError)
async def invalid_transition_handler(
    request: Request, exc: InvalidStatusTransitionError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "currentStatus": exc.current, "requestedStatus": exc.requested},
    )


# Root endpoint
@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/api/docs",
    }


# Include API routers; health probes are also served at the root for load balancers
app.include_router(api_router, prefix="/api/v1")
app.include_router(health.router)


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "ungdoms.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
