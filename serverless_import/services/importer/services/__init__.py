"""Import services."""

from serverless_import.services.importer.services.resolver import PathResolver  # noqa: F401
from serverless_import.services.importer.services.loader import ConfigLoader  # noqa: F401
from serverless_import.services.importer.services.rewriter import rewrite_handlers  # noqa: F401
from serverless_import.services.importer.services.orchestrator import (  # noqa: F401
    ImportOrchestrator,
    import_configs,
)
from serverless_import.services.importer.services.plugins import (  # noqa: F401
    diff_plugins,
    register_plugins,
)
from serverless_import.services.importer.services.import_plugin import ImportPlugin  # noqa: F401

__all__ = [
    "PathResolver",
    "ConfigLoader",
    "rewrite_handlers",
    "ImportOrchestrator",
    "import_configs",
    "diff_plugins",
    "register_plugins",
    "ImportPlugin",
]
