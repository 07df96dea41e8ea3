"""Moderator actions on users and listings."""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from dwell.core.exceptions import NotFoundError
from dwell.models import Listing, User

logger = logging.getLogger(__name__)


class ModerationService:
    def __init__(self, db: Session):
        self.db = db

    def set_user_suspension(
        self, user_id: int, suspend: bool, now: datetime | None = None
    ) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        if suspend and user.suspended_at is None:
            user.suspended_at = now or datetime.now(timezone.utc)
        elif not suspend:
            user.suspended_at = None
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"User {user_id} {'suspended' if suspend else 'unsuspended'}")
        return user

    def moderate_listing(
        self,
        listing_id: int,
        is_public: bool | None = None,
        soft_delete: bool | None = None,
        now: datetime | None = None,
    ) -> Listing:
        listing = self.db.get(Listing, listing_id)
        if listing is None:
            raise NotFoundError("Listing", listing_id)

        if is_public is not None:
            listing.is_public = is_public
        if soft_delete is True and listing.deleted_at is None:
            listing.deleted_at = now or datetime.now(timezone.utc)
        elif soft_delete is False:
            listing.deleted_at = None
        self.db.commit()
        self.db.refresh(listing)

        logger.info(
            f"Listing {listing_id} moderated: is_public={listing.is_public}, "
            f"deleted={listing.deleted_at is not None}"
        )
        return listing
