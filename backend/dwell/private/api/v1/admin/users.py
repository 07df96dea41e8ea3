from fastapi import APIRouter, Depends

from dwell.core.dependencies import get_current_admin, get_moderation_service
from dwell.models import User
from dwell.schemas.admin import SuspensionUpdate, UserModerationResponse
from dwell.services import ModerationService

router = APIRouter(prefix="/admin/users", tags=["admin-users"])


@router.post("/{user_id}/suspension", response_model=UserModerationResponse)
async def set_user_suspension(
    user_id: int,
    update: SuspensionUpdate,
    current_admin: User = Depends(get_current_admin),
    moderation_service: ModerationService = Depends(get_moderation_service),
) -> UserModerationResponse:
    """Suspend or reinstate a user. Suspended users cannot send messages."""
    user = moderation_service.set_user_suspension(user_id, update.suspend)
    return UserModerationResponse.model_validate(user)
