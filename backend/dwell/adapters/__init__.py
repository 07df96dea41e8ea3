from .email import (
    ConsoleEmailSender,
    EmailDeliveryError,
    EmailSender,
    OutboundEmail,
    ResendEmailSender,
    get_email_sender,
)

__all__ = [
    "ConsoleEmailSender",
    "EmailDeliveryError",
    "EmailSender",
    "OutboundEmail",
    "ResendEmailSender",
    "get_email_sender",
]
