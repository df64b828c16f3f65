"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings loaded from environment variables and .env file.

    Read once at startup and treated as immutable afterwards.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Slack
    slack_bot_token: str = ""
    slack_build_channel_id: str = ""

    # App
    log_level: str = "INFO"

    @property
    def default_channel_id(self) -> str | None:
        """Build channel used when a tool call omits channel_id."""
        return self.slack_build_channel_id or None


@lru_cache
def get_settings() -> Settings:
    """Return cached settings. Lazy initialization to avoid import-time errors."""
    return Settings()
