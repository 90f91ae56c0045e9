"""Configuration management using Pydantic settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TOKEN_URL = "https://zoom.us/oauth/token?grant_type=account_credentials"
MEETINGS_URL = "https://api.zoom.us/v2/users/me/meetings"


class Settings(BaseSettings):
    """Operational settings loaded from ZOOM_MEETING_* environment variables.

    Credentials are not part of the settings; they only ever come from the
    JSON config file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZOOM_MEETING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated entries in .env
    )

    # Credentials file (defaults to ~/.zoom-meeting.config.json)
    config_path: Path | None = None

    # Zoom endpoints
    token_url: str = TOKEN_URL
    api_url: str = MEETINGS_URL

    # Meeting settings
    meeting_topic: str = "My Meeting"
    meeting_type: int = Field(2, ge=1, le=2)  # 1 for instant meeting, 2 for scheduled meeting
    meeting_duration: int = 60  # minutes

    # HTTP settings; None leaves the transport default (no timeout)
    request_timeout: float | None = None

    # Link distribution
    copy_link: bool = True
    open_link: bool = True

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
