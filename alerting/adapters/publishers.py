"""Event publishers."""

import json
import logging
from collections.abc import Callable

import httpx

from alerting.adapters.interfaces import EventPublisher
from alerting.config import Settings, get_settings
from alerting.domain.models import Alert

logger = logging.getLogger(__name__)

PublisherFactory = Callable[[str], EventPublisher]


class ConsolePublisher(EventPublisher):
    """Log alerts instead of sending them anywhere."""

    async def publish_events(self, alerts: list[Alert]) -> None:
        for alert in alerts:
            logger.info("[%s] %s", self.topic, json.dumps(alert.to_event()))


class HttpPublisher(EventPublisher):
    """POST alert batches as JSON to a webhook."""

    def __init__(self, topic: str, webhook_url: str, timeout: float = 5.0) -> None:
        super().__init__(topic)
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def publish_events(self, alerts: list[Alert]) -> None:
        body = {"topic": self.topic, "events": [alert.to_event() for alert in alerts]}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                self.webhook_url,
                content=json.dumps(body),
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()


def default_publisher_factory(settings: Settings | None = None) -> PublisherFactory:
    """Webhook publisher when ``ALERT_WEBHOOK_URL`` is set, console otherwise."""

    settings = settings or get_settings()
    if settings.alert_webhook_url:
        webhook_url = settings.alert_webhook_url
        timeout = settings.alert_publish_timeout_seconds
        return lambda topic: HttpPublisher(topic, webhook_url, timeout=timeout)
    return ConsolePublisher
