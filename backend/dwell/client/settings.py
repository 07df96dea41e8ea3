"""Client SDK configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Where the SDK finds the public API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DWELL_API_URL: str = Field(
        default="http://localhost:8001/api/v1", description="Public API base URL"
    )
    DWELL_API_TIMEOUT: float = Field(
        default=5.0, gt=0, description="Request timeout in seconds (httpx default)"
    )
    DWELL_AUTH_PATH: str = Field(
        default="/auth", description="Path of the sign-in page of the web app"
    )
    DWELL_SSE_RECONNECT_SECONDS: float = Field(default=5.0, gt=0)
