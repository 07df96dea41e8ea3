from fastapi import APIRouter, Depends, Query

from dwell.config.private import settings
from dwell.core.dependencies import get_current_admin, get_report_service
from dwell.models import ReportCategory, User
from dwell.schemas.admin import ReportListResponse
from dwell.services import ReportService

router = APIRouter(prefix="/admin/reports", tags=["admin-reports"])


@router.get("", response_model=ReportListResponse)
async def list_reports(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=settings.ADMIN_PAGE_SIZE_MAX),
    category: ReportCategory | None = Query(None),
    current_admin: User = Depends(get_current_admin),
    report_service: ReportService = Depends(get_report_service),
) -> ReportListResponse:
    """List submitted reports, newest first."""
    return report_service.list_reports(page=page, page_size=page_size, category=category)
