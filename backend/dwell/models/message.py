from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .listing import Listing


class Message(Base):
    """A message from a prospective buyer/renter to a listing owner.

    Rows are only ever mutated to set ``read_at``.
    """

    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_owner_created", "owner_user_id", "created_at"),
        Index("ix_messages_pair_created", "sender_user_id", "owner_user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    listing_id: Mapped[int | None] = mapped_column(
        ForeignKey("listing.id", ondelete="SET NULL"), nullable=True
    )
    sender_user_id: Mapped[int] = mapped_column(ForeignKey("user.id"), nullable=False)
    owner_user_id: Mapped[int] = mapped_column(ForeignKey("user.id"), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    listing: Mapped[Optional["Listing"]] = relationship()

    @property
    def is_read(self) -> bool:
        return self.read_at is not None
