"""Python client SDK for the Dwell public API."""
from .api import DwellAPI, DwellAPIError, SendError, Subscription
from .background import BackgroundDispatcher
from .blocks import BlockButton, BlockRegistry, BlockStatus
from .composer import ComposerState, MessageComposer
from .inbox import Inbox, InboxRow
from .notifications import NotificationListener
from .reports import ReportDialog
from .session import SessionContext
from .settings import ClientSettings
from .toasts import Toast, ToastAction, Toaster, ToastVariant

__all__ = [
    "BackgroundDispatcher",
    "BlockButton",
    "BlockRegistry",
    "BlockStatus",
    "ClientSettings",
    "ComposerState",
    "DwellAPI",
    "DwellAPIError",
    "Inbox",
    "InboxRow",
    "MessageComposer",
    "NotificationListener",
    "ReportDialog",
    "SendError",
    "SessionContext",
    "Subscription",
    "Toast",
    "ToastAction",
    "Toaster",
    "ToastVariant",
]
