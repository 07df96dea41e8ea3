"""Outbound email adapters."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from dwell.config.public import PublicSettings

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """The provider could not be reached or refused the message."""

    pass


class OutboundEmail(BaseModel):
    to: list[str]
    subject: str
    html: str
    text: str | None = None


class EmailSender:
    """Interface of an email backend."""

    async def send(self, email: OutboundEmail) -> str | None:
        """Deliver ``email`` and return the provider's message id, if any."""
        raise NotImplementedError


class ResendEmailSender(EmailSender):
    """Adapter for the Resend transactional email HTTP API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        sender: str,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize Resend adapter.

        Args:
            base_url: Base URL of the Resend API
            api_key: Resend API key
            sender: ``From`` header value
            timeout: Request timeout in seconds
            transport: Optional transport override
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.sender = sender
        self.timeout = timeout
        self._transport = transport

    async def send(self, email: OutboundEmail) -> str | None:
        payload: dict[str, Any] = {
            "from": self.sender,
            "to": email.to,
            "subject": email.subject,
            "html": email.html,
        }
        if email.text:
            payload["text"] = email.text

        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            transport=self._transport,
        ) as client:
            try:
                response = await client.post("/emails", json=payload)
            except httpx.RequestError as e:
                logger.error(f"Email provider unreachable: {e}")
                raise EmailDeliveryError(f"Failed to reach email provider: {e}") from e

        if response.status_code >= 400:
            raise EmailDeliveryError(
                f"Email provider returned HTTP {response.status_code}: {response.text[:500]}"
            )
        return response.json().get("id")


class ConsoleEmailSender(EmailSender):
    """Logs emails instead of sending them. Used in development."""

    async def send(self, email: OutboundEmail) -> str | None:
        logger.info(f"[email] to={', '.join(email.to)} subject={email.subject!r}")
        logger.debug(email.text or email.html)
        return None


def get_email_sender(settings: PublicSettings) -> EmailSender:
    """Build the email backend selected by ``EMAIL_BACKEND``."""
    if settings.EMAIL_BACKEND == "resend":
        return ResendEmailSender(
            base_url=settings.RESEND_API_URL,
            api_key=settings.RESEND_API_KEY or "",
            sender=settings.EMAIL_FROM,
            timeout=settings.EMAIL_TIMEOUT,
        )
    return ConsoleEmailSender()
