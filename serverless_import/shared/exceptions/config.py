"""Configuration-related exceptions."""
from typing import List, Optional

from serverless_import.shared.exceptions.base import ServerlessImportError


class ConfigError(ServerlessImportError):
    """Base exception for configuration errors.

    Args:
        message: Human-readable error message
        config_file: Path to config file
        details: Additional error context
        error_code: Machine-readable error code
        original: Original exception if wrapping another exception
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        details: Optional[dict] = None,
        error_code: str = "CONFIG_ERROR",
        original: Optional[Exception] = None,
    ):
        self.config_file = config_file
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            original=original,
        )

    def __str__(self) -> str:
        parts = [self.message]
        if self.config_file:
            parts.append(f"Config: {self.config_file}")
        return " | ".join(parts)


class ConfigParseError(ConfigError):
    """A config file cannot be read, is not valid YAML/JSON, or is not a mapping."""

    def __init__(
        self,
        message: str = "Failed to parse config file",
        config_file: Optional[str] = None,
        line_number: Optional[int] = None,
        column_number: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if line_number is not None:
            details["line"] = line_number
        if column_number is not None:
            details["column"] = column_number
        super().__init__(
            message,
            config_file,
            details,
            error_code="CONFIG_PARSE_ERROR",
            original=original_error,
        )
        self.original_error = original_error


class ImportNotFoundError(ConfigError):
    """An import specifier could not be resolved to a file.

    The message always names the specifier and, when several locations
    were tried, lists every one of them.

    Args:
        specifier: Import specifier as declared in the config
        reason: Short description of what kind of lookup failed
        tried: Every location attempted, in order
    """

    def __init__(
        self,
        specifier: str,
        reason: str = "the given file doesn't exist",
        tried: Optional[List[str]] = None,
    ):
        self.specifier = specifier
        self.tried = list(tried or [])

        message = f"Cannot import {specifier}: {reason}"
        if self.tried:
            tried_lines = "\n".join(f"- {location}" for location in self.tried)
            message += f"\nTried:\n{tried_lines}"

        super().__init__(
            message,
            details={"specifier": specifier, "tried": self.tried},
            error_code="IMPORT_NOT_FOUND",
        )


class ImportLoadError(ConfigError):
    """An import was resolved but loading, parsing or executing it failed.

    Wraps the underlying cause; nested failures are wrapped once per
    enclosing import so the chain of specifiers stays visible.

    Args:
        specifier: Import specifier being processed
        original: The underlying exception
        config_file: Resolved path of the import, when known
    """

    def __init__(
        self,
        specifier: str,
        original: Exception,
        config_file: Optional[str] = None,
    ):
        self.specifier = specifier
        cause = str(original) or type(original).__name__
        super().__init__(
            f"Cannot import {specifier}\nCause: {cause}",
            details={
                "specifier": specifier,
                "path": config_file,
                "cause_type": type(original).__name__,
            },
            error_code="IMPORT_LOAD_ERROR",
            original=original,
        )
        self.import_path = config_file
