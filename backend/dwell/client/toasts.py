"""Transient notifications shown by the client views."""

import logging
from collections import deque
from enum import Enum

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

MAX_TOASTS = 50


class ToastVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class ToastAction(BaseModel):
    """A link rendered as a button on the toast."""

    label: str
    href: str
    new_tab: bool = False


class Toast(BaseModel):
    title: str
    description: str = ""
    variant: ToastVariant = ToastVariant.DEFAULT
    actions: list[ToastAction] = Field(default_factory=list)
    duration_ms: int | None = None


class Toaster:
    """Collects toasts in display order.

    Views only ever append; rendering and dismissal belong to the host UI.
    Only the newest ``MAX_TOASTS`` are kept.
    """

    def __init__(self, max_toasts: int = MAX_TOASTS) -> None:
        self.toasts: deque[Toast] = deque(maxlen=max_toasts)

    def show(
        self,
        title: str,
        description: str = "",
        variant: ToastVariant = ToastVariant.DEFAULT,
        actions: list[ToastAction] | None = None,
        duration_ms: int | None = None,
    ) -> Toast:
        toast = Toast(
            title=title,
            description=description,
            variant=variant,
            actions=actions or [],
            duration_ms=duration_ms,
        )
        self.toasts.append(toast)
        logger.debug(f"Toast: {title}")
        return toast

    def error(self, title: str, description: str) -> Toast:
        return self.show(title, description, variant=ToastVariant.DESTRUCTIVE)

    @property
    def last(self) -> Toast | None:
        return self.toasts[-1] if self.toasts else None

    def clear(self) -> None:
        self.toasts.clear()
