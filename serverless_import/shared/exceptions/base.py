"""Base exception classes for the package."""
from typing import Optional, Dict, Any


class ServerlessImportError(Exception):
    """Root of every error the importer raises.

    Unlike a plain exception it carries a stable error code and a details
    mapping, which the CLI logs as a structured field. The
    string form is the message alone so nested import errors read cleanly.

    Args:
        message: Human-readable error message
        error_code: Machine-readable error code (e.g., "IMPORT_NOT_FOUND")
        details: Additional context as dictionary
        original: Original exception if wrapping another exception
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original: Optional[Exception] = None,
    ):
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}
        self.original = original

        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Error code, message, details and class name as a dictionary."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "exception_type": self.__class__.__name__,
        }


class PluginRegistrationError(ServerlessImportError):
    """Host plugin manager cannot register imported plugins.

    Raised when the plugin manager exposes neither the synchronous
    ``load_service_plugins`` call nor the ``resolve_service_plugins`` /
    ``add_plugin`` pair.

    Args:
        plugins: Plugin names that could not be registered
    """

    def __init__(self, plugins: list):
        super().__init__(
            message=(
                "Cannot register imported plugins "
                f"{', '.join(plugins) or '(none)'}: the plugin manager supports "
                "neither load_service_plugins nor resolve_service_plugins/add_plugin"
            ),
            error_code="PLUGIN_REGISTRATION_UNSUPPORTED",
            details={"plugins": list(plugins)},
        )
        self.plugins = list(plugins)
