"""Public entrypoint configuration."""
from typing import Literal

from pydantic import Field, field_validator, model_validator

from dwell.config.database import DatabaseConfig


class PublicSettings(DatabaseConfig):
    """Configuration for Dwell Public entrypoint."""

    # Service Info
    SERVICE_NAME: str = Field(default="dwell-public")
    VERSION: str = Field(default="0.1.0")

    # Messaging limits
    DAILY_MESSAGE_LIMIT: int = Field(
        default=5, ge=1, le=100, description="Messages per sender/recipient pair per day"
    )
    MESSAGE_MAX_WORDS: int = Field(default=50, ge=1)
    MESSAGE_MAX_CHARS: int = Field(default=300, ge=1)

    # Notification dispatcher input limits
    NOTIFICATION_MAX_BODY_CHARS: int = Field(default=500, ge=1)
    NOTIFICATION_MAX_TITLE_CHARS: int = Field(default=200, ge=1)
    NOTIFICATION_MAX_SENDER_CHARS: int = Field(default=100, ge=1)

    # Email delivery
    EMAIL_BACKEND: Literal["resend", "console"] = Field(default="console")
    RESEND_API_URL: str = Field(default="https://api.resend.com")
    RESEND_API_KEY: str | None = Field(default=None)
    EMAIL_FROM: str = Field(default="Property Listings <onboarding@resend.dev>")
    EMAIL_TIMEOUT: float = Field(default=15.0, ge=1.0, le=60.0)
    EMAIL_MAX_RETRIES: int = Field(default=3, ge=1, le=10)
    EMAIL_RETRY_DELAY: float = Field(default=1.0, ge=0.0, le=30.0)

    # Links rendered into notifications
    APP_BASE_URL: str = Field(default="http://localhost:5173")

    # Realtime
    SSE_HEARTBEAT_SECONDS: float = Field(default=15.0, gt=0)

    @field_validator("APP_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended."""
        return v.rstrip("/")

    @model_validator(mode="after")
    def require_resend_key(self):
        """Resend delivery needs an API key."""
        if self.EMAIL_BACKEND == "resend" and not self.RESEND_API_KEY:
            raise ValueError("RESEND_API_KEY is required when EMAIL_BACKEND is 'resend'")
        return self


settings = PublicSettings()  # type: ignore[call-arg]
