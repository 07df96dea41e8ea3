from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .listing import Listing


class User(Base):
    """Marketplace user. Credentials live in the external auth service."""

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str | None] = mapped_column(String(320), unique=True, index=True)
    username: Mapped[str | None] = mapped_column(String(50), unique=True)
    display_name: Mapped[str | None] = mapped_column(String(100))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    suspended_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Relationships
    listings: Mapped[list["Listing"]] = relationship(back_populates="owner")

    @property
    def is_suspended(self) -> bool:
        return self.suspended_at is not None

    @property
    def label(self) -> str:
        """Human-readable name shown to other users."""
        if self.display_name:
            return self.display_name
        if self.username:
            return self.username
        if self.email:
            return self.email.split("@", 1)[0]
        return "A user"
