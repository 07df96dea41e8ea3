"""Public API listing lookup."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dwell.core.database import get_db
from dwell.core.dependencies import get_current_user
from dwell.core.exceptions import NotFoundError
from dwell.models import Listing, User
from dwell.schemas.listing import ListingSummary

router = APIRouter(prefix="/listings", tags=["listings"])


@router.get("/{listing_id}", response_model=ListingSummary)
async def get_listing(
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ListingSummary:
    """Title and owner of a listing. Removed or hidden listings are not found."""
    listing = db.get(Listing, listing_id)
    if listing is None or not listing.is_visible_to(current_user.id):
        raise NotFoundError("Listing", listing_id)
    return ListingSummary.model_validate(listing)
