"""Message extraction and error summaries."""

import traceback
from collections.abc import Mapping
from typing import Any

DEFAULT_MESSAGE = "An error occurred"
MAX_STACK_LINES = 5


def _strip(value: str) -> str | None:
    return value.strip() or None


def _property_value(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    try:
        return getattr(obj, name, None)
    except Exception:  # noqa: BLE001
        return None


def property_message(obj: Any, name: str) -> str | None:
    """Read ``name`` off a mapping or object and coerce it to a message."""

    if obj is None:
        return None
    value = _property_value(obj, name)
    if value is None:
        return None
    if isinstance(value, str):
        return _strip(value)
    if isinstance(value, (bool, int, float)):
        return str(value)
    return None


def normalize_message(value: Any) -> str:
    """Return a human readable, non-empty message for any input."""

    if isinstance(value, BaseException):
        return _strip(str(value)) or DEFAULT_MESSAGE
    if value is None:
        return DEFAULT_MESSAGE
    if isinstance(value, str):
        return _strip(value) or DEFAULT_MESSAGE
    if isinstance(value, (bool, int, float)):
        return str(value)
    return property_message(value, "msg") or property_message(value, "message") or DEFAULT_MESSAGE


def truncate_stack(stack: Any, max_lines: int = MAX_STACK_LINES) -> str:
    if not stack:
        return ""
    lines = [line.strip() for line in str(stack).splitlines()]
    return "\n".join([line for line in lines if line][:max_lines])


def format_stack(error: BaseException) -> str:
    """Render an exception message-first with the innermost frame on top."""

    head = traceback.format_exception_only(type(error), error)
    frames = traceback.format_tb(error.__traceback__) if error.__traceback__ else []
    return "".join(head + list(reversed(frames)))


def summarize_error(error: Any) -> dict[str, Any]:
    """Build a compact ``{name, message, stack}`` record from an error-like value."""

    if isinstance(error, BaseException):
        return {
            "name": type(error).__name__,
            "message": normalize_message(error),
            "stack": truncate_stack(format_stack(error)),
        }
    if error is None or isinstance(error, (str, bytes, bool, int, float)):
        return {}
    return {
        "name": _property_value(error, "name"),
        "message": normalize_message(error),
        "stack": truncate_stack(_property_value(error, "stack")),
    }
