"""Message composer with pre-send guard checks."""

import asyncio
import logging
from enum import Enum

from dwell.client.api import DwellAPIError, SendError
from dwell.client.session import SessionContext
from dwell.core.exceptions import ErrorKind
from dwell.schemas.message import DEFAULT_MAX_CHARS, DEFAULT_MAX_WORDS, BodyCheck, check_body
from dwell.schemas.notification import NotificationRequest

logger = logging.getLogger(__name__)


class ComposerState(str, Enum):
    HIDDEN = "hidden"
    SIGN_IN = "sign_in"
    LOADING = "loading"
    BLOCKED = "blocked"
    LIMIT_REACHED = "limit_reached"
    READY = "ready"


STATUS_TEXT = {
    ComposerState.BLOCKED: "Messaging Unavailable",
    ComposerState.LIMIT_REACHED: "Daily limit reached",
}

# Toast (title, description) per failure kind reported by the server.
SEND_FAILURE_TOASTS = {
    ErrorKind.BLOCKED: (
        "Messaging Unavailable",
        "You can no longer exchange messages with this user.",
    ),
    ErrorKind.RATE_LIMITED: (
        "Daily limit reached",
        "You have reached today's message limit for this owner. Try again tomorrow.",
    ),
    ErrorKind.SUSPENDED: (
        "Account Suspended",
        "Your account has been suspended and cannot send messages.",
    ),
    ErrorKind.UNKNOWN: ("Failed to Send Message", "Please try again."),
}


class MessageComposer:
    """Composer for messaging a listing owner.

    The guard (block status and remaining quota) is fetched on ``mount`` and
    after every send attempt. The server re-checks everything, so a stale
    guard only costs a rejected send followed by a refresh.
    """

    def __init__(
        self,
        session: SessionContext,
        listing_id: int,
        listing_title: str,
        owner_user_id: int,
        max_words: int = DEFAULT_MAX_WORDS,
        max_chars: int = DEFAULT_MAX_CHARS,
    ):
        self.session = session
        self.listing_id = listing_id
        self.listing_title = listing_title
        self.owner_user_id = owner_user_id
        self.max_words = max_words
        self.max_chars = max_chars

        self.body = ""
        self.body_check: BodyCheck = check_body("", max_words, max_chars)
        self.is_blocked = False
        self.remaining: int | None = None
        self.is_loading = True
        self.is_sending = False
        self._closed = False

    @property
    def is_own_listing(self) -> bool:
        return self.session.user_id == self.owner_user_id

    @property
    def state(self) -> ComposerState:
        if not self.session.is_authenticated:
            return ComposerState.SIGN_IN
        if self.is_own_listing:
            return ComposerState.HIDDEN
        if self.is_loading:
            return ComposerState.LOADING
        if self.is_blocked:
            return ComposerState.BLOCKED
        if self.remaining == 0:
            return ComposerState.LIMIT_REACHED
        return ComposerState.READY

    @property
    def status_text(self) -> str | None:
        return STATUS_TEXT.get(self.state)

    @property
    def validation_errors(self) -> list[str]:
        return self.body_check.errors

    @property
    def can_send(self) -> bool:
        return (
            self.state == ComposerState.READY
            and self.body_check.is_valid
            and not self.is_sending
        )

    def set_body(self, text: str) -> None:
        self.body = text
        self.body_check = check_body(text, self.max_words, self.max_chars)

    def sign_in(self) -> str:
        """Path to the sign-in page; the viewer is sent back here afterwards."""
        return self.session.sign_in_redirect()

    async def mount(self) -> None:
        if self.state in (ComposerState.SIGN_IN, ComposerState.HIDDEN):
            self.is_loading = False
            return
        await self.refresh_guard()

    def close(self) -> None:
        self._closed = True

    async def refresh_guard(self) -> None:
        """Fetch block status and remaining quota concurrently."""
        self.is_loading = True
        is_blocked, remaining = await asyncio.gather(
            self._fetch_block_status(), self.session.api.get_remaining_quota(self.owner_user_id)
        )
        if self._closed:
            return
        self.is_blocked = is_blocked
        self.remaining = remaining
        self.is_loading = False

    async def _fetch_block_status(self) -> bool:
        try:
            return await self.session.api.is_blocked(self.owner_user_id)
        except DwellAPIError as e:
            logger.error(f"Failed to check block status for {self.owner_user_id}: {e}")
            return False

    def _reject_locally(self) -> bool:
        toaster = self.session.toaster
        if not self.session.is_authenticated:
            toaster.error("Sign in Required", "Please sign in to send a message.")
            return True
        if self.body_check.is_empty:
            toaster.error("Message Required", "Please enter a message to send.")
            return True
        if not self.body_check.is_valid:
            toaster.error("Message Too Long", " ".join(self.body_check.errors))
            return True
        if self.is_blocked:
            toaster.error(*SEND_FAILURE_TOASTS[ErrorKind.BLOCKED])
            return True
        if self.remaining == 0:
            toaster.error(*SEND_FAILURE_TOASTS[ErrorKind.RATE_LIMITED])
            return True
        return False

    async def send(self) -> bool:
        """Send the current body. Returns True when the message was stored."""
        if self.is_sending or self.state in (ComposerState.HIDDEN, ComposerState.LOADING):
            return False
        if self._reject_locally():
            return False

        body = self.body.strip()
        self.is_sending = True
        try:
            created = await self.session.api.insert_message(
                self.listing_id, self.owner_user_id, body
            )
        except SendError as e:
            if not self._closed:
                self._report_failure(e)
                await self.refresh_guard()
            return False
        finally:
            self.is_sending = False

        self.session.dispatcher.submit(
            self.session.api.dispatch_notification(
                NotificationRequest(
                    message_id=created.id,
                    listing_title=self.listing_title,
                    sender_name=self.session.user_label,
                    message_body=body,
                    owner_user_id=self.owner_user_id,
                    listing_id=self.listing_id,
                )
            ),
            name=f"notify-message-{created.id}",
        )
        # The message is stored; only the view updates are skipped after close.
        if self._closed:
            return True

        self.set_body("")
        self.session.toaster.show(
            "Message Sent", "Your message has been sent to the property owner."
        )
        await self.refresh_guard()
        return True

    def _report_failure(self, error: SendError) -> None:
        logger.error(f"Failed to send message to {self.owner_user_id}: {error}")
        if error.kind == ErrorKind.VALIDATION:
            self.session.toaster.error("Failed to Send Message", error.message)
            return
        title, description = SEND_FAILURE_TOASTS.get(
            error.kind, SEND_FAILURE_TOASTS[ErrorKind.UNKNOWN]
        )
        self.session.toaster.error(title, description)
