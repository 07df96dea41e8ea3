from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BLOCK_REASON = "User initiated block"


class BlockCreate(BaseModel):
    """Schema for blocking another user."""

    target_user_id: int
    reason: str = Field(default=DEFAULT_BLOCK_REASON, max_length=500)


class BlockResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_a: int
    user_b: int
    created_by: int
    reason: str | None
    created_at: datetime


class BlockStatus(BaseModel):
    target_user_id: int
    is_blocked: bool
