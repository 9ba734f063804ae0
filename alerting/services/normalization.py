"""Alert normalization service."""

import math
from collections.abc import Mapping
from typing import Any

from alerting.config import DEFAULT_SOURCE, Settings, get_settings
from alerting.domain.models import Alert, AlertInputKind
from alerting.utils.messages import normalize_message, summarize_error
from alerting.utils.redaction import sanitize_value

_ALERT_FIELDS = ("source", "type", "data")


def resolve_source(source: str | None = None, settings: Settings | None = None) -> str:
    """Explicit source, then configured/``ALERT_SOURCE``, then the package default."""

    settings = settings or get_settings()
    return source or settings.alert_source or DEFAULT_SOURCE


def _is_rejected(value: Any) -> bool:
    # 0 is a meaningful value; the other falsy scalars mean "nothing to alert on".
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return math.isnan(value)
    return False


def classify_input(value: Any) -> AlertInputKind:
    if _is_rejected(value):
        return AlertInputKind.rejected
    if isinstance(value, Alert):
        return AlertInputKind.prebuilt
    if isinstance(value, Mapping) and any(field in value for field in _ALERT_FIELDS):
        return AlertInputKind.prebuilt
    if isinstance(value, BaseException):
        return AlertInputKind.error_like
    return AlertInputKind.generic


def _own_text(fields: Mapping, name: str) -> str | None:
    value = fields.get(name)
    return value if isinstance(value, str) and value else None


def _prebuilt_alert(value: Any, default_source: str, default_type: str | None) -> Alert:
    fields = value.model_dump() if isinstance(value, Alert) else value
    if "data" in fields:
        data = fields["data"]
    else:
        data = sanitize_value(fields)

    if not data:
        data = {"message": normalize_message(value)}
    elif isinstance(data, Mapping) and "message" not in data:
        data = {**data, "message": normalize_message(value)}

    return Alert(
        source=_own_text(fields, "source") or default_source,
        type=_own_text(fields, "type") or default_type,
        data=data,
    )


def _generic_data(value: Any) -> dict[str, Any]:
    message = normalize_message(value)
    sanitized = sanitize_value(value)
    if isinstance(sanitized, dict):
        data = sanitized
    elif isinstance(sanitized, list):
        data = {"items": sanitized}
    else:
        # scalars are already carried by the message
        data = {}
    data["message"] = message
    return data


def build_alert(
    value: Any,
    default_type: str | None = None,
    *,
    source: str | None = None,
    settings: Settings | None = None,
) -> Alert | None:
    """Classify ``value`` and turn it into a canonical alert.

    Returns None for inputs that carry nothing to alert on (None, "", False, NaN).
    """

    default_source = resolve_source(source, settings)
    kind = classify_input(value)

    if kind == AlertInputKind.rejected:
        return None
    if kind == AlertInputKind.prebuilt:
        return _prebuilt_alert(value, default_source, default_type)
    if kind == AlertInputKind.error_like:
        return Alert(source=default_source, type=default_type, data=summarize_error(value))
    return Alert(source=default_source, type=default_type, data=_generic_data(value))
