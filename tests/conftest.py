import os

import pytest

os.environ["ALERT_SOURCE"] = "test-source"
os.environ["ALERT_TOPIC"] = "test.alerts"
os.environ.pop("ALERT_TYPE", None)
os.environ.pop("ALERT_WEBHOOK_URL", None)

from alerting.config import get_settings  # noqa: E402
from alerting.domain.models import Alert  # noqa: E402


class RecordingPublisher:
    """In-memory publisher that remembers every batch it was given."""

    instances: list["RecordingPublisher"] = []

    def __init__(self, topic: str, error: Exception | None = None) -> None:
        self.topic = topic
        self.error = error
        self.batches: list[list[Alert]] = []
        RecordingPublisher.instances.append(self)

    async def publish_events(self, alerts: list[Alert]) -> None:
        self.batches.append(alerts)
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    RecordingPublisher.instances.clear()
    yield
    get_settings.cache_clear()
    RecordingPublisher.instances.clear()


@pytest.fixture
def recording_publisher():
    return RecordingPublisher
