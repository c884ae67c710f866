"""Environment-driven settings for the chart client."""

from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from ``YAHOO_CHART_*`` variables or a local .env file."""

    BASE_URL: str = "https://query1.finance.yahoo.com"
    TIMEOUT_S: float = 10.0
    USER_AGENT: str = "Mozilla/5.0 (X11; Linux x86_64) yahoo-chart/0.1"
    TIMEZONE: str = ""
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="YAHOO_CHART_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def tzinfo(self) -> ZoneInfo | None:
        """Return the configured zone, or None to use the host's local time."""

        name = self.TIMEZONE.strip()
        if not name:
            return None
        return ZoneInfo(name)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings to avoid repeated environment parsing."""

    return Settings()
