"""Structured JSON log formatter.

Every line is a single JSON object. Import context (the specifier being
processed and its depth in the import tree) is attached whenever a fragment
is being processed, so a failing nested import can be traced back through
its parents.
"""
import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

from serverless_import.shared.utils.logging.context import get_context


# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}

# Template inputs and provider blocks routinely carry credentials
_SENSITIVE_PATTERNS = (
    "api_key",
    "password",
    "passwd",
    "token",
    "secret",
    "authorization",
    "bearer",
)

REDACTED = "[REDACTED]"


def _is_sensitive(key: Any) -> bool:
    key_lower = str(key).lower()
    return any(pattern in key_lower for pattern in _SENSITIVE_PATTERNS)


def _serialize_value(value: Any) -> Any:
    """Convert a value to something json.dumps accepts, recursively."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, dict):
        return {str(k): _serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_serialize_value(item) for item in value]
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _redact_sensitive(data: Any) -> Any:
    """Replace values stored under secret-looking keys with a marker.

    Nested mappings and lists are walked; other values pass through.
    """
    if isinstance(data, dict):
        return {
            key: REDACTED if _is_sensitive(key) else _redact_sensitive(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [_redact_sensitive(item) for item in data]
    return data


def extract_extra(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the fields passed through ``extra=`` on a log call."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class StructuredJSONFormatter(logging.Formatter):
    """Formats records as JSON objects.

    Fields: ``timestamp`` (UTC, ISO 8601), ``level``, ``service_name``,
    ``logger_name``, ``message``, the log context (``correlation_id``,
    ``operation_name``, ``import_specifier``, ``import_depth``), the
    caller's function and line, any ``extra=`` fields with secrets
    redacted, and ``exception`` / ``stack_trace`` for records carrying
    exception info.
    """

    def __init__(self, service_name: str = "serverless-import"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        context = get_context()
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service_name": context.pop("service_name") or self.service_name,
            "logger_name": record.name,
            "message": record.getMessage(),
        }
        entry.update(context)
        entry["source_function"] = record.funcName
        entry["source_line"] = record.lineno

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
            }
            entry["stack_trace"] = traceback.format_exception(exc_type, exc_value, exc_tb)

        entry.update(_redact_sensitive(extract_extra(record)))
        return json.dumps(_serialize_value(entry), default=str)
