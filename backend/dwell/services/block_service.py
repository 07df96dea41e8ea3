"""Block registry: symmetric blocks between pairs of users."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from dwell.core.exceptions import DatabaseError, NotFoundError, ValidationError
from dwell.models import User, UserBlock, normalize_pair
from dwell.schemas.block import DEFAULT_BLOCK_REASON

logger = logging.getLogger(__name__)


class BlockService:
    """Service for block relation operations.

    Every query goes through the normalized (user_a, user_b) pair so that a
    block created by either side is seen by both.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_block(self, first_user_id: int, second_user_id: int) -> UserBlock | None:
        user_a, user_b = normalize_pair(first_user_id, second_user_id)
        return (
            self.db.query(UserBlock)
            .filter(UserBlock.user_a == user_a, UserBlock.user_b == user_b)
            .first()
        )

    def is_blocked(self, first_user_id: int, second_user_id: int) -> bool:
        if first_user_id == second_user_id:
            return False
        return self.get_block(first_user_id, second_user_id) is not None

    def create_block(
        self, actor_id: int, target_user_id: int, reason: str = DEFAULT_BLOCK_REASON
    ) -> UserBlock:
        """Block ``target_user_id`` on behalf of ``actor_id``.

        Blocking an already-blocked pair returns the existing row.
        """
        if actor_id == target_user_id:
            raise ValidationError("You cannot block yourself", field="target_user_id")

        existing = self.get_block(actor_id, target_user_id)
        if existing is not None:
            return existing

        if self.db.get(User, target_user_id) is None:
            raise NotFoundError("User", target_user_id)

        user_a, user_b = normalize_pair(actor_id, target_user_id)
        block = UserBlock(user_a=user_a, user_b=user_b, created_by=actor_id, reason=reason)
        self.db.add(block)
        try:
            self.db.commit()
        except IntegrityError:
            # The other side blocked concurrently.
            self.db.rollback()
            existing = self.get_block(actor_id, target_user_id)
            if existing is None:
                raise DatabaseError("Failed to create block")
            return existing
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to block user {target_user_id} for {actor_id}: {e}")
            raise DatabaseError("Failed to create block") from e

        self.db.refresh(block)
        logger.info(f"User {actor_id} blocked user {target_user_id}")
        return block

    def remove_block(self, actor_id: int, target_user_id: int) -> bool:
        """Hard-delete the pair's block. Returns False when there was none."""
        user_a, user_b = normalize_pair(actor_id, target_user_id)
        try:
            deleted = (
                self.db.query(UserBlock)
                .filter(UserBlock.user_a == user_a, UserBlock.user_b == user_b)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to unblock user {target_user_id} for {actor_id}: {e}")
            raise DatabaseError("Failed to remove block") from e

        if deleted:
            logger.info(f"User {actor_id} unblocked user {target_user_id}")
        return bool(deleted)
