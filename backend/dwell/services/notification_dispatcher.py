"""Email notification for newly received messages."""

import html
import logging

from sqlalchemy.orm import Session

from dwell.adapters.email import EmailDeliveryError, EmailSender, OutboundEmail
from dwell.config.public import PublicSettings
from dwell.core.exceptions import (
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
    NotificationRejectedError,
)
from dwell.models import Message, User
from dwell.schemas.notification import NotificationRequest, NotificationResult
from dwell.services.retry_handler import RetryHandler

logger = logging.getLogger(__name__)

EMAIL_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">You have a new message!</h2>
  <div style="background-color: #f9f9f9; padding: 20px; border-radius: 8px; margin: 20px 0;">
    <h3 style="color: #333; margin-top: 0;">Property: {title}</h3>
    <p><strong>From:</strong> {sender}</p>
    <p><strong>Message:</strong></p>
    <p style="background-color: white; padding: 15px; border-left: 4px solid #007bff; white-space: pre-wrap;">{body}</p>
  </div>
  <div style="text-align: center; margin: 30px 0;">
    <a href="{listing_url}">View Listing</a>
    <br><br>
    <a href="{inbox_url}">View All Messages</a>
  </div>
  <hr style="border: none; border-top: 1px solid #eee; margin: 30px 0;">
  <p style="color: #666; font-size: 12px;">
    This email was sent because someone sent you a message about your property listing.
  </p>
</div>
"""


class NotificationDispatcher:
    """Validates a dispatch request, resolves the recipient and emails them.

    Message text is user-supplied, so every value interpolated into the
    HTML is escaped.
    """

    def __init__(self, db: Session, email_sender: EmailSender, settings: PublicSettings):
        self.db = db
        self.email_sender = email_sender
        self.settings = settings

    def validate(self, request: NotificationRequest) -> None:
        limits = (
            ("message_body", request.message_body, self.settings.NOTIFICATION_MAX_BODY_CHARS),
            ("listing_title", request.listing_title, self.settings.NOTIFICATION_MAX_TITLE_CHARS),
            ("sender_name", request.sender_name, self.settings.NOTIFICATION_MAX_SENDER_CHARS),
        )
        for field, value, limit in limits:
            if not value or not value.strip() or len(value) > limit:
                raise NotificationRejectedError(
                    f"{field} is required and must be at most {limit} characters",
                    details={"field": field},
                )

    def render(self, request: NotificationRequest) -> OutboundEmail:
        title = html.escape(request.listing_title)
        base_url = self.settings.APP_BASE_URL
        body = EMAIL_TEMPLATE.format(
            title=title,
            sender=html.escape(request.sender_name),
            body=html.escape(request.message_body),
            listing_url=f"{base_url}/listing/{request.listing_id}",
            inbox_url=f"{base_url}/inbox",
        )
        text = (
            f"New message about {request.listing_title} from {request.sender_name}:\n\n"
            f"{request.message_body}\n\n"
            f"View all messages: {base_url}/inbox"
        )
        return OutboundEmail(
            to=[],
            subject=f"New message about: {title}",
            html=body,
            text=text,
        )

    async def dispatch(self, caller_id: int, request: NotificationRequest) -> NotificationResult:
        self.validate(request)

        message = self.db.get(Message, request.message_id)
        if message is None:
            raise NotFoundError("Message", request.message_id)
        if message.sender_user_id != caller_id:
            raise AuthorizationError("Only the sender can request a notification")
        if message.owner_user_id != request.owner_user_id:
            raise NotificationRejectedError("Recipient does not match the message")

        owner = self.db.get(User, request.owner_user_id)
        if owner is None or not owner.email:
            logger.error(f"No email on file for user {request.owner_user_id}")
            raise NotificationRejectedError(
                "Could not send notification - owner email not found"
            )

        email = self.render(request)
        email.to = [owner.email]

        logger.info(f"Sending notification for message {request.message_id}")
        try:
            email_id = await RetryHandler.with_retry(
                self.email_sender.send,
                email,
                max_retries=self.settings.EMAIL_MAX_RETRIES,
                delay=self.settings.EMAIL_RETRY_DELAY,
                retry_on=(EmailDeliveryError,),
            )
        except EmailDeliveryError as e:
            raise ExternalServiceError("email", str(e)) from e

        return NotificationResult(success=True, email_id=email_id)
