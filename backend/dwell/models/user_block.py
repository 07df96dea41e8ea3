from sqlalchemy import CheckConstraint, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


def normalize_pair(first_user_id: int, second_user_id: int) -> tuple[int, int]:
    """Order a pair of user ids so (a, b) and (b, a) map to the same row."""
    if first_user_id < second_user_id:
        return first_user_id, second_user_id
    return second_user_id, first_user_id


class UserBlock(Base):
    """Symmetric block between two users, stored as a normalized pair."""

    __tablename__ = "user_blocks"
    __table_args__ = (
        UniqueConstraint("user_a", "user_b", name="uq_user_blocks_pair"),
        CheckConstraint("user_a < user_b", name="ordered_pair"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_a: Mapped[int] = mapped_column(
        ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_b: Mapped[int] = mapped_column(
        ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_by: Mapped[int] = mapped_column(ForeignKey("user.id"), nullable=False)
    reason: Mapped[str | None] = mapped_column(String(500))

    def __repr__(self) -> str:
        return f"<UserBlock(user_a={self.user_a}, user_b={self.user_b})>"
