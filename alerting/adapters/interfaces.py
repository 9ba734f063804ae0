"""Adapter interface contracts."""

from abc import ABC, abstractmethod

from alerting.domain.models import Alert


class EventPublisher(ABC):
    """Deliver a batch of alerts to one event topic."""

    def __init__(self, topic: str) -> None:
        self.topic = topic

    @abstractmethod
    async def publish_events(self, alerts: list[Alert]) -> None:
        raise NotImplementedError
