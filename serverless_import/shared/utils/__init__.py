"""Shared utilities module."""

from serverless_import.shared.utils import config  # noqa: F401
from serverless_import.shared.utils import logging  # noqa: F401

__all__ = [
    # Module resolution, YAML/JSON loading, merging
    "config",
    # Structured logging and log context
    "logging",
]
