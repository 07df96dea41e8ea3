import enum

from sqlalchemy import CheckConstraint, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ReportCategory(str, enum.Enum):
    """Reason a listing or user was reported."""

    FAKE = "fake"
    SPAM = "spam"
    INAPPROPRIATE = "inappropriate"
    PRICING = "pricing"  # Listing reports only
    HARASSMENT = "harassment"  # User reports only
    OTHER = "other"


LISTING_REPORT_CATEGORIES = (
    ReportCategory.FAKE,
    ReportCategory.SPAM,
    ReportCategory.INAPPROPRIATE,
    ReportCategory.PRICING,
    ReportCategory.OTHER,
)

USER_REPORT_CATEGORIES = (
    ReportCategory.HARASSMENT,
    ReportCategory.SPAM,
    ReportCategory.INAPPROPRIATE,
    ReportCategory.FAKE,
    ReportCategory.OTHER,
)


class Report(Base):
    """User-submitted report, reviewed by moderators."""

    __tablename__ = "reports"
    __table_args__ = (
        CheckConstraint(
            "reported_user_id IS NOT NULL OR listing_id IS NOT NULL",
            name="has_target",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    reporter_user_id: Mapped[int] = mapped_column(
        ForeignKey("user.id"), nullable=False, index=True
    )
    reported_user_id: Mapped[int | None] = mapped_column(
        ForeignKey("user.id", ondelete="SET NULL"), index=True
    )
    listing_id: Mapped[int | None] = mapped_column(
        ForeignKey("listing.id", ondelete="SET NULL"), index=True
    )
    category: Mapped[ReportCategory] = mapped_column(
        Enum(ReportCategory, native_enum=False, length=20), nullable=False
    )
    reason: Mapped[str] = mapped_column(String(1000), nullable=False)
    details: Mapped[str | None] = mapped_column(Text)
