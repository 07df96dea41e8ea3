from pydantic import BaseModel


class NotificationRequest(BaseModel):
    """Payload the composer hands to the notification dispatcher.

    Lengths are checked by the dispatcher itself so that malformed calls are
    answered with a 400 rather than a schema error.
    """

    message_id: int
    listing_title: str
    sender_name: str
    message_body: str
    owner_user_id: int
    listing_id: int


class NotificationResult(BaseModel):
    success: bool
    email_id: str | None = None
