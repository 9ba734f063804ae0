"""Processing-context alert data."""

from collections.abc import Mapping
from typing import Any


class AlertPayloadError(TypeError):
    """Raised when a processing alert payload is structurally invalid."""


def validate_payload(payload: Any) -> str:
    """Return the payload's process name or raise ``AlertPayloadError``."""

    if not payload or not isinstance(payload, Mapping):
        raise AlertPayloadError("payload must be a mapping with at least a `process` key")
    process_name = payload.get("process")
    if not process_name or not isinstance(process_name, str):
        raise AlertPayloadError("payload['process'] (str) is required")
    return process_name


def _needs_message(alert_data: dict[str, Any]) -> bool:
    message = alert_data.get("message")
    if message is None:
        return True
    return isinstance(message, str) and not message.strip()


def _extract_message(maybe_error: Any, process_name: str) -> tuple[str, bool]:
    fallback = f"Failed processing {process_name}"
    if isinstance(maybe_error, BaseException):
        return str(maybe_error) or fallback, False
    if isinstance(maybe_error, Mapping) and isinstance(maybe_error.get("message"), str):
        return maybe_error["message"], False
    if isinstance(maybe_error, str):
        return maybe_error, True
    if maybe_error is not None and isinstance(getattr(maybe_error, "message", None), str):
        return maybe_error.message, False
    return fallback, False


def derive_alert_data(payload: Mapping[str, Any], process_name: str) -> dict[str, Any]:
    """Copy ``payload`` with ``process`` pinned and a guaranteed ``message``.

    A plain string ``error`` moves into ``message`` and the ``error`` field is
    cleared so the text is not sent twice.
    """

    alert_data = {**payload, "process": process_name}
    if not _needs_message(alert_data):
        return alert_data

    message, clear_error = _extract_message(alert_data.get("error"), process_name)
    alert_data["message"] = message
    if clear_error:
        alert_data["error"] = None
    return alert_data
