"""serverless-import: compose a serverless configuration from imported fragments."""

from serverless_import.services.importer import (  # noqa: F401
    ImporterSettings,
    ImportOrchestrator,
    ImportPlugin,
    import_configs,
)
from serverless_import.shared.exceptions import (  # noqa: F401
    ConfigError,
    ImportLoadError,
    ImportNotFoundError,
)
from serverless_import.shared.utils.config.merger import merge  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "ImporterSettings",
    "ImportOrchestrator",
    "ImportPlugin",
    "import_configs",
    "merge",
    "ConfigError",
    "ImportLoadError",
    "ImportNotFoundError",
]
