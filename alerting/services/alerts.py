"""Alert submission orchestration."""

import logging
from collections.abc import Mapping
from typing import Any

from alerting.adapters.publishers import PublisherFactory, default_publisher_factory
from alerting.config import DEFAULT_ALERT_TYPE, DEFAULT_TOPIC, Settings, get_settings
from alerting.domain.models import Alert
from alerting.services.normalization import build_alert
from alerting.services.processing import derive_alert_data, validate_payload


def _process_name(payloads: Any) -> str:
    if isinstance(payloads, list) and payloads and isinstance(payloads[0], Mapping):
        return payloads[0].get("process") or "unknown"
    return "unknown"


class AlertClient:
    """Build alerts from raw inputs and hand them to an event publisher."""

    def __init__(
        self,
        settings: Settings | None = None,
        publisher_factory: PublisherFactory | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.publisher_factory = publisher_factory or default_publisher_factory(self.settings)
        self.logger = logger or logging.getLogger(__name__)

    def resolve_topic(self, topic: str | None = None) -> str:
        return topic or self.settings.alert_topic or DEFAULT_TOPIC

    def resolve_type(self, alert_type: str | None = None, default_type: str | None = None) -> str:
        for candidate in (alert_type, default_type, self.settings.alert_type):
            if candidate is not None:
                return candidate
        return DEFAULT_ALERT_TYPE

    def build_alerts(self, inputs: Any, alert_type: str | None = None, *, source: str | None = None) -> list[Alert]:
        items = inputs if isinstance(inputs, list) else [inputs]
        alerts = [build_alert(item, alert_type, source=source, settings=self.settings) for item in items]
        return [alert for alert in alerts if alert is not None]

    async def create_alerts(
        self,
        inputs: Any,
        alert_type: str | None = None,
        *,
        source: str | None = None,
        topic: str | None = None,
    ) -> list[Alert]:
        """Publish one batch built from ``inputs``; empty batches are a no-op."""

        alerts = self.build_alerts(inputs, alert_type, source=source)
        if not alerts:
            return []

        publisher = self.publisher_factory(self.resolve_topic(topic))
        try:
            await publisher.publish_events(alerts)
        except Exception:
            self.logger.error("Failed to publish alerts", exc_info=True)
            raise
        return alerts

    async def publish(
        self,
        payloads: Any,
        alert_type: str | None = None,
        *,
        throw_on_publish_error: bool = False,
        source: str | None = None,
        topic: str | None = None,
    ) -> list[Alert]:
        try:
            return await self.create_alerts(payloads, alert_type, source=source, topic=topic)
        except Exception:
            self.logger.error("Failed to publish processing alert for %s", _process_name(payloads), exc_info=True)
            if throw_on_publish_error:
                raise
            return []

    async def data_processing_alert(
        self,
        payload: Mapping[str, Any],
        alert_type: str | None = None,
        *,
        default_type: str | None = None,
        throw_on_publish_error: bool = False,
        source: str | None = None,
        topic: str | None = None,
    ) -> list[Alert]:
        """Publish a single alert describing a failed processing step.

        Raises ``AlertPayloadError`` when ``payload`` has no string ``process``.
        """

        process_name = validate_payload(payload)
        effective_type = self.resolve_type(alert_type, default_type)
        alert_data = derive_alert_data(payload, process_name)
        return await self.publish(
            [alert_data],
            effective_type,
            throw_on_publish_error=throw_on_publish_error,
            source=source,
            topic=topic,
        )


async def create_alerts(inputs: Any, alert_type: str | None = None, **kwargs: Any) -> list[Alert]:
    return await AlertClient().create_alerts(inputs, alert_type, **kwargs)


async def data_processing_alert(payload: Mapping[str, Any], alert_type: str | None = None, **kwargs: Any) -> list[Alert]:
    return await AlertClient().data_processing_alert(payload, alert_type, **kwargs)
