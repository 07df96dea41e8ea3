from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class MessageRow(BaseModel):
    """Identifiers of a newly inserted message; the body is fetched separately."""

    id: int
    listing_id: int | None
    sender_user_id: int
    owner_user_id: int
    created_at: datetime


class MessageInsertEvent(BaseModel):
    """Change event published to the recipient's realtime channel."""

    type: Literal["INSERT"] = "INSERT"
    table: Literal["messages"] = "messages"
    new: MessageRow
