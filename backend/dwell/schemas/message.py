from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_WORDS = 50
DEFAULT_MAX_CHARS = 300


def count_words(text: str) -> int:
    """Whitespace-separated words after trimming; empty text has 0 words."""
    stripped = text.strip()
    return len(stripped.split()) if stripped else 0


class BodyCheck(BaseModel):
    """Result of checking a message body against the word/character limits."""

    word_count: int
    char_count: int
    max_words: int = DEFAULT_MAX_WORDS
    max_chars: int = DEFAULT_MAX_CHARS

    @property
    def is_empty(self) -> bool:
        return self.word_count == 0

    @property
    def over_word_limit(self) -> bool:
        return self.word_count > self.max_words

    @property
    def over_char_limit(self) -> bool:
        return self.char_count > self.max_chars

    @property
    def is_valid(self) -> bool:
        return not (self.is_empty or self.over_word_limit or self.over_char_limit)

    @property
    def errors(self) -> list[str]:
        """Every limit violation, reported together."""
        errors = []
        if self.over_word_limit:
            errors.append(f"Message exceeds {self.max_words} word limit.")
        if self.over_char_limit:
            errors.append(f"Message exceeds {self.max_chars} character limit.")
        return errors


def check_body(
    text: str, max_words: int = DEFAULT_MAX_WORDS, max_chars: int = DEFAULT_MAX_CHARS
) -> BodyCheck:
    """Check raw composer text against the limits."""
    return BodyCheck(
        word_count=count_words(text),
        char_count=len(text),
        max_words=max_words,
        max_chars=max_chars,
    )


class MessageCreate(BaseModel):
    """Schema for sending a message to a listing owner."""

    listing_id: int
    owner_user_id: int
    body: str = Field(..., max_length=5000)


class MessageCreated(BaseModel):
    """Acknowledgement of an inserted message."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class MessageResponse(BaseModel):
    """Full message row, visible to its sender and recipient."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    listing_id: int | None
    sender_user_id: int
    owner_user_id: int
    body: str
    created_at: datetime
    read_at: datetime | None


class InboxMessage(BaseModel):
    """Message row as listed in the recipient's inbox."""

    id: int
    listing_id: int | None
    sender_user_id: int
    body: str
    created_at: datetime
    read_at: datetime | None
    listing_title: str

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


class QuotaResponse(BaseModel):
    """Remaining daily allowance for a sender/recipient pair."""

    recipient_id: int
    remaining: int = Field(..., ge=0)
    daily_limit: int


class UnreadCount(BaseModel):
    unread: int = Field(..., ge=0)
