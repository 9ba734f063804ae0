"""Alerting configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TOPIC = "alerts"
DEFAULT_SOURCE = "alerting"
DEFAULT_ALERT_TYPE = "data.processing.error"


class Settings(BaseSettings):
    """Environment-driven settings.

    Construct one explicitly at process start to pin the topic, source and
    default type; otherwise ``ALERT_TOPIC``, ``ALERT_SOURCE`` and ``ALERT_TYPE``
    are read from the environment.
    """

    alert_topic: str | None = None
    alert_source: str | None = None
    alert_type: str | None = None
    alert_webhook_url: str | None = None
    alert_publish_timeout_seconds: float = 5.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""

    return Settings()
