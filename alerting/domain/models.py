"""Domain schemas and enums."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class AlertInputKind(str, Enum):
    """How the builder treats a raw input."""

    prebuilt = "prebuilt"
    error_like = "error_like"
    generic = "generic"
    rejected = "rejected"


class Alert(BaseModel):
    """Canonical alert envelope handed to an event publisher."""

    source: str
    type: str | None = None
    data: Any

    model_config = ConfigDict(ser_json_bytes="base64")

    def to_event(self) -> dict[str, Any]:
        return self.model_dump(mode="json", fallback=str)
