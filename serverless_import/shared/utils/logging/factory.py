"""Root logger setup for the CLI and for hosts embedding the importer."""
import logging
import sys
from typing import List, Optional

from serverless_import.shared.utils.logging.context import _service_name_var
from serverless_import.shared.utils.logging.formatters import StructuredJSONFormatter

_logger = logging.getLogger(__name__)

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_service_name_global: Optional[str] = None


def _make_formatter(service_name: str, json_logs: bool) -> logging.Formatter:
    if json_logs:
        return StructuredJSONFormatter(service_name=service_name)
    return logging.Formatter(PLAIN_FORMAT)


def configure_logging(
    service_name: str = "serverless-import",
    level: int = logging.INFO,
    json_logs: bool = False,
    log_file: Optional[str] = None,
    enable_console: bool = True,
) -> None:
    """Replace the root logger's handlers.

    Console output goes to stderr: stdout is reserved for the composed
    configuration printed by the CLI.

    Args:
        service_name: Name reported in JSON log lines
        level: Root log level
        json_logs: One JSON object per line instead of plain text
        log_file: Also append to this file
        enable_console: Write to stderr
    """
    global _service_name_global
    _service_name_global = service_name

    formatter = _make_formatter(service_name, json_logs)
    handlers: List[logging.Handler] = []
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _logger.debug(
        "Logging configured",
        extra={
            "log_level": logging.getLevelName(level),
            "json_logs": json_logs,
            "log_file": log_file,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``.

    Seeds the service name into the log context the first time, once
    ``configure_logging`` has run.
    """
    if _service_name_global and _service_name_var.get(None) is None:
        _service_name_var.set(_service_name_global)
    return logging.getLogger(name)


def disable_logging() -> None:
    """Drop all root handlers in favor of a NullHandler (tests, embedding hosts)."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(logging.NullHandler())
