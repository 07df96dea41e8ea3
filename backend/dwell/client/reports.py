"""Dialog for reporting a user or a listing."""

import logging

from pydantic import ValidationError as PydanticValidationError

from dwell.client.api import DwellAPIError
from dwell.client.session import SessionContext
from dwell.models.report import ReportCategory
from dwell.schemas.report import ReportCreate, ReportResponse, categories_for

logger = logging.getLogger(__name__)


class ReportDialog:
    def __init__(
        self,
        session: SessionContext,
        reported_user_id: int | None = None,
        listing_id: int | None = None,
    ):
        self.session = session
        self.reported_user_id = reported_user_id
        self.listing_id = listing_id
        self.is_open = False
        self.is_submitting = False

    @property
    def report_type(self) -> str:
        return "listing" if self.listing_id is not None else "user"

    @property
    def categories(self) -> tuple[ReportCategory, ...]:
        return categories_for(self.listing_id)

    def open(self) -> None:
        self.is_open = True

    async def submit(
        self,
        category: ReportCategory | str | None,
        reason: str,
        details: str = "",
    ) -> ReportResponse | None:
        toaster = self.session.toaster
        if not self.session.is_authenticated:
            toaster.error("Sign in Required", "Please sign in to submit a report.")
            return None
        if not category:
            toaster.error("Category Required", "Please select a category for your report.")
            return None
        if not reason.strip():
            toaster.error("Reason Required", "Please provide a reason for your report.")
            return None

        try:
            category = ReportCategory(category)
        except ValueError:
            category = None
        if category not in self.categories:
            toaster.error("Category Required", "Please select a category for your report.")
            return None

        try:
            report = ReportCreate(
                reported_user_id=self.reported_user_id,
                listing_id=self.listing_id,
                category=category,
                reason=reason,
                details=details,
            )
        except PydanticValidationError as e:
            logger.error(f"Invalid report: {e}")
            toaster.error("Error", "Failed to submit report. Please try again.")
            return None

        self.is_submitting = True
        try:
            created = await self.session.api.create_report(report)
        except DwellAPIError as e:
            logger.error(f"Error submitting report: {e}")
            toaster.error("Error", "Failed to submit report. Please try again.")
            return None
        finally:
            self.is_submitting = False

        toaster.show(
            "Report Submitted", "Thank you for your report. Our team will review it shortly."
        )
        self.is_open = False
        return created
