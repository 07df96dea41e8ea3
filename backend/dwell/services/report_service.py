"""Report intake and moderator listing."""

import logging
import math

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dwell.core.exceptions import DatabaseError, NotFoundError
from dwell.models import Listing, Report, ReportCategory, User
from dwell.schemas.admin import ReportListResponse
from dwell.schemas.report import ReportCreate, ReportResponse

logger = logging.getLogger(__name__)


class ReportService:
    """Service for report operations."""

    def __init__(self, db: Session):
        self.db = db

    def create_report(self, reporter_id: int, report_data: ReportCreate) -> Report:
        if report_data.reported_user_id is not None:
            if self.db.get(User, report_data.reported_user_id) is None:
                raise NotFoundError("User", report_data.reported_user_id)
        if report_data.listing_id is not None:
            if self.db.get(Listing, report_data.listing_id) is None:
                raise NotFoundError("Listing", report_data.listing_id)

        report = Report(
            reporter_user_id=reporter_id,
            reported_user_id=report_data.reported_user_id,
            listing_id=report_data.listing_id,
            category=report_data.category,
            reason=report_data.reason,
            details=report_data.details,
        )
        self.db.add(report)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to store report from user {reporter_id}: {e}")
            raise DatabaseError("Failed to submit report") from e

        self.db.refresh(report)
        logger.info(
            f"Report {report.id} filed by user {reporter_id} "
            f"(category={report.category.value})"
        )
        return report

    def list_reports(
        self, page: int = 1, page_size: int = 20, category: ReportCategory | None = None
    ) -> ReportListResponse:
        query = self.db.query(Report)
        if category is not None:
            query = query.filter(Report.category == category)

        total = query.count()
        total_pages = math.ceil(total / page_size)
        offset = (page - 1) * page_size

        reports = (
            query.order_by(desc(Report.created_at), desc(Report.id))
            .offset(offset)
            .limit(page_size)
            .all()
        )
        return ReportListResponse(
            reports=[ReportResponse.model_validate(r) for r in reports],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
        )
