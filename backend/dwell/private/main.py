"""FastAPI application for the Dwell moderation entrypoint."""
import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from dwell.config.private import settings
from dwell.core.database import SessionLocal
from dwell.core.exceptions import DwellException
from dwell.core.logging import setup_logging
from dwell.private.api.v1.health import check_dependencies
from dwell.private.api.v1.router import api_router

setup_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Report database and Redis reachability before serving moderators."""
    logger.info(
        f"Starting Dwell moderation API ({settings.ENVIRONMENT}), "
        f"admin page size <= {settings.ADMIN_PAGE_SIZE_MAX}"
    )
    db = SessionLocal()
    try:
        status, checks = await check_dependencies(db)
    finally:
        db.close()
    if status != "ready":
        logger.warning(f"Moderation API starting with unavailable dependencies: {checks}")

    yield

    logger.info("Shutting down Dwell moderation API")


app = FastAPI(
    title="Dwell Private API",
    description="Internal API for marketplace moderation",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
    lifespan=lifespan,
)

if settings.ENVIRONMENT == "production":
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def audit_middleware(request: Request, call_next):
    """Log every moderation request with its outcome."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"in {process_time:.3f}s",
        extra={"client_ip": request.client.host if request.client else None},
    )
    return response


@app.exception_handler(DwellException)
async def dwell_exception_handler(request: Request, exc: DwellException):
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


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "INTERNAL_SERVER_ERROR",
            "message": "An unexpected error occurred",
            "details": {}
            if settings.ENVIRONMENT == "production"
            else {"exception": str(exc)},
        },
    )


app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/")
async def root():
    return {
        "service": "Dwell Private API",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }
