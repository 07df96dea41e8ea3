from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from .report import ReportResponse


class ReportListResponse(BaseModel):
    """Paginated reports for moderators."""

    reports: list[ReportResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


class SuspensionUpdate(BaseModel):
    suspend: bool


class UserModerationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_active: bool
    suspended_at: datetime | None


class ListingModerationUpdate(BaseModel):
    is_public: bool | None = None
    soft_delete: bool | None = None

    @model_validator(mode="after")
    def check_not_empty(self):
        if self.is_public is None and self.soft_delete is None:
            raise ValueError("Nothing to update")
        return self


class ListingModerationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_public: bool
    deleted_at: datetime | None
