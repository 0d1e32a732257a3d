"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from edamam_bot.domain.nutrition import Credentials

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    edamam_app_id: str
    edamam_app_key: str
    telegram_bot_token: str
    telegram_allowed_user_ids: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def edamam_credentials(self) -> Credentials:
        """Return the Edamam credential pair."""
        return Credentials(app_id=self.edamam_app_id, app_key=self.edamam_app_key)


def parse_allowed_user_ids(raw: str | None) -> set[int] | None:
    """Parse allowed Telegram user IDs from env."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    chunks = (chunk.strip() for chunk in cleaned.split(","))
    ids = {int(chunk) for chunk in chunks if chunk.isdigit()}
    return ids or None
