import os
import signal
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from redirect_app.config import settings
from redirect_app.dependencies import get_store
from redirect_app.exceptions import FatalInvariantViolation
from redirect_app.logging_config import setup_logging
from redirect_app.api.v1 import entries, visits, redirect
from redirect_app.store import Store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and build the process-wide store once at startup"""
    setup_logging()
    get_store()
    logger.info("{} {} started ({})", settings.app_name, settings.app_version, settings.environment)
    yield
    logger.info("{} stopped", settings.app_name)


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Short-code redirect service with visit logging",
    debug=settings.debug,
    lifespan=lifespan
)


@app.exception_handler(FatalInvariantViolation)
async def fatal_invariant_handler(request: Request, exc: FatalInvariantViolation):
    """The store can no longer be trusted: report it and take the process down"""
    logger.critical("Fatal store failure on {} {}: {}", request.method, request.url.path, exc)
    if settings.exit_on_fatal:
        os.kill(os.getpid(), signal.SIGTERM)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal store failure"}
    )


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check(store: Store = Depends(get_store)):
    """Health check endpoint"""
    if store.poisoned:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "environment": settings.environment}
        )
    return {
        "status": "healthy",
        "environment": settings.environment,
        "entries": store.entries.count(),
        "visits": store.visits.count()
    }




######## Include routers (catch-all redirect last)
app.include_router(entries.router)
app.include_router(visits.router)
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port)
