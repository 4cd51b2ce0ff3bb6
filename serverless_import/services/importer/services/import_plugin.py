"""Host integration: runs the import pass inside a serverless host.

Coordinates:
- Copying the host's raw configuration
- The import pass (ImportOrchestrator)
- Writing the merged result back into the host
- Registering plugins that imports introduced

All collaborators are taken from the host or injected through the
constructor.
"""
import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from serverless_import.shared.exceptions.base import ServerlessImportError
from serverless_import.shared.interfaces import IFileReader, IModuleResolver, IServerlessHost
from serverless_import.shared.utils.logging.context import log_context
from serverless_import.services.importer.config import ImporterSettings, get_settings
from serverless_import.services.importer.services.loader import ConfigLoader
from serverless_import.services.importer.services.orchestrator import ImportOrchestrator
from serverless_import.services.importer.services.plugins import diff_plugins, register_plugins
from serverless_import.services.importer.services.resolver import PathResolver


logger = logging.getLogger(__name__)


class HostFileReader:
    """Adapts the host's ``utils.read_file_sync`` to IFileReader."""

    def __init__(self, utils: Any):
        self.utils = utils

    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        return self.utils.read_file_sync(str(path))


class ImportPlugin:
    """Imports config fragments into a host's configuration.

    Example:
        plugin = ImportPlugin(host)
        await plugin.initialize()
        # host configuration and plugin list now include every import

        # Testing use with mocks
        from serverless_import.shared.testing.mocks import InMemoryHost

        host = InMemoryHost({"custom": {"import": ["shared"]}})
        await ImportPlugin(host, root_dir=tmp_path).initialize()

    Attributes:
        host: Host tool (IServerlessHost)
        settings: Importer settings
        configuration: Working copy of the host configuration
        orchestrator: Import orchestrator owning ``configuration``
        registered_plugins: Plugins handed to the plugin manager
    """

    def __init__(
        self,
        host: IServerlessHost,
        settings: Optional[ImporterSettings] = None,
        file_reader: Optional[IFileReader] = None,
        module_resolver: Optional[IModuleResolver] = None,
        root_dir: Optional[Union[str, Path]] = None,
    ):
        self.host = host
        self.settings = settings or get_settings()
        self.configuration: Dict[str, Any] = copy.deepcopy(host.configuration_input or {})

        if file_reader is None and callable(getattr(getattr(host, "utils", None), "read_file_sync", None)):
            file_reader = HostFileReader(host.utils)

        self.orchestrator = ImportOrchestrator(
            self.configuration,
            settings=self.settings,
            resolver=PathResolver(settings=self.settings, module_resolver=module_resolver),
            loader=ConfigLoader(settings=self.settings, file_reader=file_reader),
            root_dir=root_dir,
        )
        self.registered_plugins: List[Any] = []
        self._initialized = False

    async def initialize(self) -> None:
        """Run the import pass and publish the result to the host.

        Completes only once plugin registration has finished.

        Raises:
            ConfigError: If an import fails (or the host's error class, when
                the host exposes one)
            PluginRegistrationError: If the plugin manager supports neither
                registration convention
        """
        if self._initialized:
            return

        async with log_context(operation_name="import_configuration"):
            try:
                self.orchestrator.run()
            except ServerlessImportError as e:
                error_class = getattr(self.host, "error_class", None)
                if error_class is None:
                    raise
                raise error_class(str(e)) from e

            for key, value in self.configuration.items():
                self.host.extend_configuration([key], value)
            self.host.service.reload_service_file_param()

            self.registered_plugins = await self.load_imported_plugins()

            self._initialized = True
            logger.info(
                "Configuration import finished",
                extra={
                    "imports": len(self.orchestrator.imported),
                    "new_plugins": len(self.registered_plugins),
                },
            )

    async def load_imported_plugins(self) -> List[Any]:
        """Register plugins that imports added to the configuration.

        Returns:
            Registered plugins
        """
        existing = self.host.service.plugins or []
        imported = self.configuration.get("plugins") or []
        new_plugins = diff_plugins(imported, existing)

        logger.debug(
            "Computed imported plugins",
            extra={"existing": list(existing), "new_plugins": new_plugins},
        )
        return await register_plugins(self.host.plugin_manager, new_plugins)
