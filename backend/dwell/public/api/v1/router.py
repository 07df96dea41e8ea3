"""API v1 router for public endpoints."""

from fastapi import APIRouter

from .blocks import router as blocks_router
from .listings import router as listings_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .realtime import router as realtime_router
from .reports import router as reports_router

api_router = APIRouter()
api_router.include_router(messages_router)
api_router.include_router(blocks_router)
api_router.include_router(listings_router)
api_router.include_router(reports_router)
api_router.include_router(notifications_router)
api_router.include_router(realtime_router)
