"""FastAPI application for Dwell Public entrypoint."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dwell.config.public import settings
from dwell.core.dependencies import close_realtime_broker
from dwell.core.exceptions import DwellException, ErrorKind
from dwell.core.logging import setup_logging
from dwell.public.api.v1.router import api_router

setup_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    logger.info("Starting Dwell Public entrypoint...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Email backend: {settings.EMAIL_BACKEND}")

    yield

    logger.info("Shutting down Dwell Public entrypoint...")
    await close_realtime_broker()


app = FastAPI(
    title="Dwell Public API",
    description="Messaging and moderation API for the property marketplace",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all requests."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"in {process_time:.3f}s"
    )
    return response


@app.exception_handler(DwellException)
async def dwell_exception_handler(request: Request, exc: DwellException):
    """Handle custom Dwell exceptions."""
    if exc.status_code >= 500:
        logger.error(f"Dwell exception: {exc}", exc_info=True)
    else:
        logger.warning(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed payloads in the same envelope as other errors."""
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": message,
            "details": {
                "kind": ErrorKind.VALIDATION.value,
                "errors": [
                    {"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in errors
                ],
            },
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "INTERNAL_SERVER_ERROR",
            "message": "An unexpected error occurred",
            "details": {"kind": ErrorKind.UNKNOWN.value}
            if settings.ENVIRONMENT == "production"
            else {"kind": ErrorKind.UNKNOWN.value, "exception": str(exc)},
        },
    )


# Include API router
app.include_router(api_router, prefix=settings.API_V1_STR)


# Health check endpoints
@app.get("/health")
async def health_check() -> dict[str, str]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.SERVICE_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }
