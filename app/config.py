from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PATH = Path(__file__).resolve().parent.parent / ".env.local"


class Settings(BaseSettings):
    # Environment settings
    environment: str = "development"
    debug: bool = False
    LOG_LEVEL: str = "INFO"

    # =================================================================
    # CONTACT QUEUE SETTINGS
    # =================================================================
    CONTACT_QUEUE_TIMEZONE: str = "UTC"
    CONTACT_QUEUE_MY_QUEUE_SIZE: int = 5
    CONTACT_QUEUE_MAX_RESULTS: int = 500

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def queue_timezone(self) -> ZoneInfo:
        """Timezone used to decide what "today" is for a queue run, UTC if unknown."""
        try:
            return ZoneInfo(self.CONTACT_QUEUE_TIMEZONE)
        except (ZoneInfoNotFoundError, ValueError):
            return ZoneInfo("UTC")

    def queue_today(self) -> date:
        """
        Current calendar date in the configured queue timezone.

        Read once per request and passed down; the pipeline never reads the clock.
        """
        return datetime.now(self.queue_timezone()).date()


settings = Settings()

# =================================================================
# QUICK CONFIGURATION REFERENCE
# =================================================================
"""
Environment variables (or .env.local):

    CONTACT_QUEUE_TIMEZONE=America/Chicago   # counselors' local day boundary
    CONTACT_QUEUE_MY_QUEUE_SIZE=5            # items in a counselor's "my queue"
    CONTACT_QUEUE_MAX_RESULTS=500            # upper bound for ?limit on the API
    LOG_LEVEL=DEBUG
"""
