"""Config importer.

Composes one serverless configuration from a root config and the fragments
it imports under ``custom.import``.

Components:
- PathResolver: turns an import specifier into a config file path
- ConfigLoader: reads data files and renders template sources
- rewrite_handlers: keeps function handlers valid after flattening
- ImportOrchestrator: walks the import tree and merges every fragment
- ImportPlugin: runs the import pass inside a host and registers new plugins

Usage:
    from serverless_import.services.importer import ImportPlugin

    plugin = ImportPlugin(host)
    await plugin.initialize()
"""
from serverless_import.services.importer.config import (  # noqa: F401
    ImporterSettings,
    get_settings,
    set_settings,
)
from serverless_import.services.importer.schemas import (  # noqa: F401
    Fragment,
    ImportSpec,
    StaticFragment,
    TemplateFragment,
    declared_imports,
)
from serverless_import.services.importer.services import (  # noqa: F401
    ConfigLoader,
    ImportOrchestrator,
    ImportPlugin,
    PathResolver,
    diff_plugins,
    import_configs,
    register_plugins,
    rewrite_handlers,
)

__all__ = [
    # Config
    "ImporterSettings",
    "get_settings",
    "set_settings",
    # Schemas
    "Fragment",
    "ImportSpec",
    "StaticFragment",
    "TemplateFragment",
    "declared_imports",
    # Services
    "ConfigLoader",
    "ImportOrchestrator",
    "ImportPlugin",
    "PathResolver",
    "diff_plugins",
    "import_configs",
    "register_plugins",
    "rewrite_handlers",
]
