"""Health check endpoints for private API."""
import logging
from typing import Any

import redis.asyncio as redis
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from dwell.config.private import settings
from dwell.core.database import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


async def ping_redis() -> bool:
    client = redis.from_url(settings.REDIS_URL, socket_timeout=5.0)
    try:
        return bool(await client.ping())
    finally:
        await client.aclose()


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """
    Basic health check endpoint.

    Returns basic service information without external dependencies.
    """
    return {
        "status": "healthy",
        "service": settings.SERVICE_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }


async def check_dependencies(db: Session) -> tuple[str, dict[str, Any]]:
    """Probe the database and Redis; returns ``(status, checks)``."""
    checks: dict[str, Any] = {}
    status = "ready"

    try:
        db.execute(text("SELECT 1"))
        checks["database"] = {
            "status": "healthy",
            "url": settings.DATABASE_URL.split("@")[-1]
            if "@" in settings.DATABASE_URL
            else "masked",
        }
    except Exception as e:
        checks["database"] = {"status": "error", "error": str(e)}
        status = "not_ready"
        logger.error(f"Database check error: {e}")

    try:
        redis_healthy = await ping_redis()
        checks["redis"] = {"status": "healthy" if redis_healthy else "unhealthy"}
        if not redis_healthy:
            status = "not_ready"
            logger.warning("Redis ping returned a falsy reply")
    except Exception as e:
        checks["redis"] = {"status": "error", "error": str(e)}
        status = "not_ready"
        logger.error(f"Redis check error: {e}")

    return status, checks


@router.get("/ready")
async def readiness_check(db: Session = Depends(get_db)) -> dict[str, Any]:
    """Database and Redis (realtime feed) reachability; 503 when either fails."""
    status, checks = await check_dependencies(db)
    response_data = {
        "status": status,
        "service": settings.SERVICE_NAME,
        "checks": checks,
    }
    if status != "ready":
        raise HTTPException(status_code=503, detail=response_data)
    return response_data
