from fastapi import APIRouter, Depends

from dwell.core.dependencies import get_current_admin, get_moderation_service
from dwell.models import User
from dwell.schemas.admin import ListingModerationResponse, ListingModerationUpdate
from dwell.services import ModerationService

router = APIRouter(prefix="/admin/listings", tags=["admin-listings"])


@router.post("/{listing_id}/moderation", response_model=ListingModerationResponse)
async def moderate_listing(
    listing_id: int,
    update: ListingModerationUpdate,
    current_admin: User = Depends(get_current_admin),
    moderation_service: ModerationService = Depends(get_moderation_service),
) -> ListingModerationResponse:
    """Hide, unhide, soft-delete or restore a listing."""
    listing = moderation_service.moderate_listing(
        listing_id, is_public=update.is_public, soft_delete=update.soft_delete
    )
    return ListingModerationResponse.model_validate(listing)
