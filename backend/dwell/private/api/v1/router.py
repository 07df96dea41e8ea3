"""Main API router for private v1 endpoints."""

from fastapi import APIRouter

from dwell.private.api.v1.admin.listings import router as admin_listings_router
from dwell.private.api.v1.admin.reports import router as admin_reports_router
from dwell.private.api.v1.admin.users import router as admin_users_router
from dwell.private.api.v1.health import router as health_router

api_router = APIRouter()

# Include health check routes
api_router.include_router(
    health_router,
    tags=["health"],
)

# Moderation
api_router.include_router(admin_reports_router)
api_router.include_router(admin_users_router)
api_router.include_router(admin_listings_router)
