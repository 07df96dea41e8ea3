"""Public API report intake."""

from fastapi import APIRouter, Depends, status

from dwell.core.dependencies import get_current_user, get_report_service
from dwell.models import User
from dwell.schemas.report import ReportCreate, ReportResponse
from dwell.services import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def create_report(
    report_data: ReportCreate,
    current_user: User = Depends(get_current_user),
    report_service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    report = report_service.create_report(current_user.id, report_data)
    return ReportResponse.model_validate(report)
