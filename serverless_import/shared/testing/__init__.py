"""Testing helpers: in-memory host and plugin manager doubles."""

from serverless_import.shared.testing.mocks import (  # noqa: F401
    FileReaderUtils,
    HostError,
    InMemoryHost,
    InMemoryHostService,
    MockAsyncPluginManager,
    MockPluginManager,
    UnsupportedPluginManager,
)

__all__ = [
    "FileReaderUtils",
    "HostError",
    "InMemoryHost",
    "InMemoryHostService",
    "MockAsyncPluginManager",
    "MockPluginManager",
    "UnsupportedPluginManager",
]
