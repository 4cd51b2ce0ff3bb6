"""Structured logging utility."""

from serverless_import.shared.utils.logging.context import (  # noqa: F401
    correlation_id_generator,
    get_context,
    get_correlation_id,
    get_import_depth,
    get_import_specifier,
    get_operation_name,
    get_service_name,
    log_context,
)
from serverless_import.shared.utils.logging.factory import (  # noqa: F401
    configure_logging,
    disable_logging,
    get_logger,
)
from serverless_import.shared.utils.logging.formatters import StructuredJSONFormatter  # noqa: F401

__all__ = [
    # Context management
    "get_correlation_id",
    "get_service_name",
    "get_operation_name",
    "get_import_specifier",
    "get_import_depth",
    "get_context",
    "log_context",
    "correlation_id_generator",
    # Factory
    "configure_logging",
    "get_logger",
    "disable_logging",
    # Formatters
    "StructuredJSONFormatter",
]
