"""Private entrypoint configuration."""

from pydantic import Field, field_validator

from dwell.config.database import DatabaseConfig


class PrivateSettings(DatabaseConfig):
    """Configuration for Dwell Private (moderation) entrypoint."""

    SERVICE_NAME: str = Field(default="dwell-private")
    VERSION: str = Field(default="0.1.0")

    ALLOWED_HOSTS: list[str] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1"],
        description="Hosts accepted in production",
    )
    ADMIN_PAGE_SIZE_MAX: int = Field(default=100, ge=1, le=500)

    @field_validator("ALLOWED_HOSTS", mode="before")
    @classmethod
    def parse_allowed_hosts(cls, v):
        """Parse allowed hosts from string or list."""
        if isinstance(v, str):
            return [host.strip() for host in v.split(",")]
        return v


settings = PrivateSettings()  # type: ignore[call-arg]
