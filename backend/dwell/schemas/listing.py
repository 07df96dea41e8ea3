from pydantic import BaseModel, ConfigDict


class ListingSummary(BaseModel):
    """The listing fields the messaging surfaces need."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    owner_user_id: int
