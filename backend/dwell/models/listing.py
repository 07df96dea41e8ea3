from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .user import User


class Listing(Base):
    """Property listing.

    Listing CRUD is owned elsewhere; the messaging core only reads the title
    and owner, and moderators toggle visibility.
    """

    __tablename__ = "listing"

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_user_id: Mapped[int] = mapped_column(
        ForeignKey("user.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    owner: Mapped["User"] = relationship(back_populates="listings")

    @property
    def is_removed(self) -> bool:
        return self.deleted_at is not None

    def is_visible_to(self, user_id: int) -> bool:
        """Hidden listings stay visible to their owner; removed ones to nobody."""
        if self.is_removed:
            return False
        return self.is_public or self.owner_user_id == user_id
