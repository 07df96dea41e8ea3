"""Redis configuration for the realtime feed."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedisSettings(BaseSettings):
    """Redis connection pool settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    redis_max_connections: int = Field(
        default=20,
        description="Maximum number of connections in the Redis pool",
    )
    redis_decode_responses: bool = Field(
        default=True,
        description="Whether to decode Redis responses to strings",
    )
    redis_socket_timeout: float = Field(
        default=5.0,
        description="Socket timeout for Redis operations in seconds",
    )
    redis_retry_on_timeout: bool = Field(
        default=True,
        description="Whether to retry operations on timeout",
    )

    # Realtime feed
    realtime_channel_prefix: str = Field(
        default="dwell:realtime:",
        description="Prefix for realtime pub/sub channels",
    )


# Global instance
redis_settings = RedisSettings()
