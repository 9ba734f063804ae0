"""Sensitive data redaction utilities."""

import dataclasses
import re
from collections.abc import Mapping
from datetime import date, time
from decimal import Decimal
from enum import Enum
from types import ModuleType
from typing import Any
from uuid import UUID

SENSITIVE_KEY_PATTERN = re.compile(r"(password|pass|secret|token|key|credential|auth|api[_-]?key)", re.IGNORECASE)
REDACTED = "[REDACTED]"
CIRCULAR = "[Circular]"
TRUNCATED = "[Truncated]"
MAX_SANITIZED_LENGTH = 200
MAX_DEPTH = 100

_SCALARS = (str, bytes, bytearray, int, float, Enum, date, time, Decimal, UUID)
_SEQUENCES = (list, tuple, set, frozenset)


def is_sensitive_key(key: str | None) -> bool:
    """Return True when a field name looks like it carries a credential."""

    return bool(key) and SENSITIVE_KEY_PATTERN.search(key) is not None


def _is_blank(item: Any) -> bool:
    return item is None or (isinstance(item, str) and not item.strip())


def _attributes(value: Any) -> dict[str, Any] | None:
    """Expose an arbitrary object's fields as a mapping, or None for opaque values."""

    if isinstance(value, (type, ModuleType)) or callable(value):
        return None
    try:
        if dataclasses.is_dataclass(value):
            return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
        return dict(vars(value))
    except Exception:  # noqa: BLE001
        return None


def _is_composite(value: Any) -> bool:
    if isinstance(value, (Mapping, *_SEQUENCES)):
        return True
    if isinstance(value, _SCALARS) or value is None:
        return False
    return _attributes(value) is not None


def sanitize_value(
    value: Any,
    key: str | None = None,
    seen: dict[int, Any] | None = None,
    depth: int = 0,
) -> Any:
    """Return a bounded, redacted copy of ``value`` or None when nothing is left.

    ``seen`` tracks every composite entered during one top-level call, keyed by
    ``id()``. A composite met a second time anywhere in that call becomes
    ``CIRCULAR``, whether it closes a cycle or is merely shared. The top-level
    value has no key and so is never redacted by name.
    """

    if seen is None:
        seen = {}

    if is_sensitive_key(key):
        return REDACTED

    composite = _is_composite(value)
    if composite and id(value) in seen:
        return CIRCULAR

    if value is None:
        return None

    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")

    if isinstance(value, str) and len(value) > MAX_SANITIZED_LENGTH:
        return REDACTED

    if isinstance(value, (bool, int, float)):
        return value

    if not composite:
        return value

    if depth >= MAX_DEPTH:
        return TRUNCATED

    seen[id(value)] = value
    if isinstance(value, _SEQUENCES):
        return _sanitize_sequence(value, key, seen, depth + 1)
    if isinstance(value, Mapping):
        return _sanitize_mapping(value, seen, depth + 1)
    return _sanitize_mapping(_attributes(value) or {}, seen, depth + 1)


def _sanitize_mapping(mapping: Mapping, seen: dict[int, Any], depth: int) -> dict[str, Any] | None:
    sanitized: dict[str, Any] = {}
    for raw_key, item in mapping.items():
        field = raw_key if isinstance(raw_key, str) else str(raw_key)
        result = sanitize_value(item, field, seen, depth)
        if result is not None:
            sanitized[field] = result
    return sanitized or None


def _sanitize_sequence(items, key: str | None, seen: dict[int, Any], depth: int) -> list[Any] | None:
    sanitized = [sanitize_value(item, key, seen, depth) for item in items]
    sanitized = [item for item in sanitized if not _is_blank(item)]
    return sanitized or None
