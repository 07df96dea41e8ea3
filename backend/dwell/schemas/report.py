from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dwell.models.report import (
    LISTING_REPORT_CATEGORIES,
    USER_REPORT_CATEGORIES,
    ReportCategory,
)


def categories_for(listing_id: int | None) -> tuple[ReportCategory, ...]:
    """Categories offered for a report; listing reports take precedence."""
    return LISTING_REPORT_CATEGORIES if listing_id is not None else USER_REPORT_CATEGORIES


class ReportCreate(BaseModel):
    """Schema for reporting a user and/or a listing."""

    reported_user_id: int | None = None
    listing_id: int | None = None
    category: ReportCategory
    reason: str = Field(..., max_length=1000)
    details: str | None = Field(default=None, max_length=2000)

    @field_validator("reason")
    @classmethod
    def reason_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("A reason is required")
        return v

    @field_validator("details")
    @classmethod
    def blank_details_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @model_validator(mode="after")
    def check_target(self):
        if self.reported_user_id is None and self.listing_id is None:
            raise ValueError("A report needs a reported user or a listing")
        if self.category not in categories_for(self.listing_id):
            raise ValueError(f"Category '{self.category.value}' is not valid for this report")
        return self


class ReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    reporter_user_id: int
    reported_user_id: int | None
    listing_id: int | None
    category: ReportCategory
    reason: str
    details: str | None
    created_at: datetime
