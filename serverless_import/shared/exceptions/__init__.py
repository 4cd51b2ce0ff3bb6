"""Custom exceptions for the package."""

from serverless_import.shared.exceptions.base import (
    ServerlessImportError,
    PluginRegistrationError,
)

from serverless_import.shared.exceptions.config import (
    ConfigError,
    ConfigParseError,
    ImportNotFoundError,
    ImportLoadError,
)

__all__ = [
    # Base exceptions
    "ServerlessImportError",
    "PluginRegistrationError",
    # Configuration exceptions
    "ConfigError",
    "ConfigParseError",
    "ImportNotFoundError",
    "ImportLoadError",
]
