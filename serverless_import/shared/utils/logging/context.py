"""Log context management using contextvars.

The import walk is recursive, so every log line emitted while a fragment is
being processed carries the specifier and the depth of that fragment.
"""
import contextvars
import uuid
from typing import Any, Dict, List, Optional


_correlation_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)
_service_name_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "service_name", default=None
)
_operation_name_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "operation_name", default=None
)
_import_specifier_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "import_specifier", default=None
)
_import_depth_var: contextvars.ContextVar[int] = contextvars.ContextVar(
    "import_depth", default=0
)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id_var.get(None)


def get_service_name() -> Optional[str]:
    """Get current service name from context."""
    return _service_name_var.get(None)


def get_operation_name() -> Optional[str]:
    """Get current operation name from context."""
    return _operation_name_var.get(None)


def get_import_specifier() -> Optional[str]:
    """Get the specifier of the import currently being processed."""
    return _import_specifier_var.get(None)


def get_import_depth() -> int:
    """Get the nesting depth of the import currently being processed."""
    return _import_depth_var.get(0)


def get_context() -> Dict[str, Any]:
    """Get all context values as a dictionary."""
    return {
        "correlation_id": get_correlation_id(),
        "service_name": get_service_name(),
        "operation_name": get_operation_name(),
        "import_specifier": get_import_specifier(),
        "import_depth": get_import_depth(),
    }


class log_context:
    """Context manager for adding metadata to logs.

    Works both as a plain and as an async context manager. Values that are
    left as None keep whatever the enclosing context set.

    Example:
        with log_context(import_specifier="shared/serverless.yml", import_depth=1):
            logger.info("Importing")
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        service_name: Optional[str] = None,
        operation_name: Optional[str] = None,
        import_specifier: Optional[str] = None,
        import_depth: Optional[int] = None,
    ):
        self._values = [
            (_correlation_id_var, correlation_id),
            (_service_name_var, service_name),
            (_operation_name_var, operation_name),
            (_import_specifier_var, import_specifier),
            (_import_depth_var, import_depth),
        ]
        self._tokens: List[contextvars.Token] = []

    def __enter__(self) -> "log_context":
        for var, value in self._values:
            if value is not None:
                self._tokens.append(var.set(value))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        while self._tokens:
            token = self._tokens.pop()
            token.var.reset(token)

    async def __aenter__(self) -> "log_context":
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)


def correlation_id_generator(func):
    """Decorator to auto-generate a correlation ID for one call.

    Example:
        @correlation_id_generator
        def compose():
            # correlation_id will be available in logs
            pass
    """
    def wrapper(*args, **kwargs):
        new_id = str(uuid.uuid4())
        with log_context(correlation_id=new_id):
            return func(*args, **kwargs)

    return wrapper
