"""Public API block endpoints."""

from fastapi import APIRouter, Depends, Response, status

from dwell.core.dependencies import get_block_service, get_current_user
from dwell.models import User
from dwell.schemas.block import BlockCreate, BlockResponse, BlockStatus
from dwell.services import BlockService

router = APIRouter(prefix="/blocks", tags=["blocks"])


@router.get("/{target_user_id}", response_model=BlockStatus)
async def get_block_status(
    target_user_id: int,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service),
) -> BlockStatus:
    """Whether a block exists between the current user and the target, either way."""
    return BlockStatus(
        target_user_id=target_user_id,
        is_blocked=block_service.is_blocked(current_user.id, target_user_id),
    )


@router.post("", response_model=BlockResponse, status_code=status.HTTP_201_CREATED)
async def create_block(
    block_data: BlockCreate,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service),
) -> BlockResponse:
    block = block_service.create_block(
        current_user.id, block_data.target_user_id, block_data.reason
    )
    return BlockResponse.model_validate(block)


@router.delete("/{target_user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_block(
    target_user_id: int,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service),
) -> Response:
    """Remove the block with the target. Succeeds when no block exists."""
    block_service.remove_block(current_user.id, target_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
